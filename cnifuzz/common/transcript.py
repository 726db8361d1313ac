import logging

import hexdump

from cnifuzz.errors import LogFileError
from cnifuzz import utils


class Transcript(object):
    """
    Log file of the plugin invocations, one block per invocation.

    Blocks are appended in the order of the invocations.
    """

    def __init__(self, filename, useHexdump=False):
        self.filename = filename
        self.useHexdump = useHexdump
        self.f = None
        self.entryCount = 0


    def open(self):
        try:
            self.f = open(self.filename, 'w', encoding='utf-8')
        except (IOError, OSError) as e:
            raise LogFileError("Could not open log file %s: %s" % (self.filename, str(e)))
        logging.info("Transcript: " + self.filename)


    def close(self):
        if self.f is not None:
            self.f.close()
            self.f = None


    def __enter__(self):
        self.open()
        return self


    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


    def _inputStr(self, data):
        if self.useHexdump:
            return "\n" + hexdump.hexdump(data, result='return')
        return utils.toText(data)


    def write(self, result, invocationArgs, output, error=None):
        lines = [ "Command: %s - %s" % (result.command, result.getStatusStr()) ]
        if not result.successful:
            lines.append("Error: " + utils.xstr(error))
        lines.append("Input data: " + self._inputStr(invocationArgs.stdinData))
        lines.append("Output: " + utils.toText(output) + "\n")

        self.f.write("\n".join(lines) + "\n")
        self.f.flush()
        self.entryCount += 1
