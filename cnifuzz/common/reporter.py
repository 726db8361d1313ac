import time


def getErrorHistogram(tally):
    """error code -> number of failed invocations with that code"""
    errCodes = {}
    for r in tally.fCalls:
        errCodes[r.code] = errCodes.get(r.code, 0) + 1
    return errCodes


class Reporter(object):
    """Summary of a fuzzing session. Reads the tally, never changes it."""

    def __init__(self, logPath=None):
        self.logPath = logPath


    def summarize(self, tally):
        lines = []
        lines.append("Performed %d tests of which:" % tally.getTotalCount())
        lines.append("%d failed" % tally.getFailCount())
        lines.append("%d succeeded" % tally.getSuccessCount())
        lines.append("")

        lines.append("Errors by error code:")
        errCodes = getErrorHistogram(tally)
        for code in sorted(errCodes):
            lines.append("Code: %d\tErrors:\t%d" % (code, errCodes[code]))

        if tally.getCrashCount() > 0:
            lines.append("")
            lines.append("Failures with crash marker: %d" % tally.getCrashCount())

        if self.logPath is not None:
            lines.append("")
            lines.append("More details can be found in " + self.logPath)

        return "\n".join(lines)


    def writeStatsFile(self, tally, filename, startTime=None):
        """Same numbers as summarize(), as "key : value" lines."""
        now = int(time.time())
        if startTime is None:
            startTime = now

        with open(filename, 'w') as f:
            f.write('%-18s: %i\n' % ('start_time', startTime))
            f.write('%-18s: %i\n' % ('last_update', now))
            f.write('%-18s: %i\n' % ('execs_done', tally.getTotalCount()))
            f.write('%-18s: %i\n' % ('execs_failed', tally.getFailCount()))
            f.write('%-18s: %i\n' % ('execs_succeeded', tally.getSuccessCount()))
            f.write('%-18s: %i\n' % ('crash_markers', tally.getCrashCount()))

            errCodes = getErrorHistogram(tally)
            for code in sorted(errCodes):
                f.write('%-18s: %i\n' % ('error_code_' + str(code), errCodes[code]))
