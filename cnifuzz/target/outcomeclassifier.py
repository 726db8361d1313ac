import logging
import re
import signal
import subprocess

from cnifuzz.common.invocationdata import InvocationResult
from cnifuzz.target.crashdetector import MarkerCrashDetector
from cnifuzz import utils


# a well behaving plugin reports caught errors as json, with an error code
codeRe = re.compile(br'"code":\s*([0-9]+)')
MaxCodeDigits = 18


def getErrorCode(output):
    """Recover error code from output if available, or 0."""
    if not output:
        return 0

    found = codeRe.search(output)
    if found is None:
        return 0

    digits = found.group(1)
    # too many digits to be a real error code
    if len(digits) > MaxCodeDigits:
        return 0

    return int(digits)


def getErrorText(error):
    """
    Text of the error, without the command line of the plugin.

    The path of the plugin could contain a crash marker by itself.
    """
    if isinstance(error, subprocess.CalledProcessError):
        if error.returncode < 0:
            try:
                return "died with %r" % signal.Signals(-error.returncode)
            except ValueError:
                return "died with unknown signal %d" % -error.returncode
        return "exit status %d" % error.returncode
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error)


class OutcomeClassifier(object):
    """
    Judges a single plugin invocation.

    - exit code 0: success
    - otherwise: failure. If the plugin reported an error code, it
      rejected the input in a controlled way. Without code (0) it
      may have crashed.

    The crash detector only decides if the invocation is interesting
    enough for a panicOnly transcript, never whether it failed.
    """

    def __init__(self, crashDetector=None):
        if crashDetector is None:
            crashDetector = MarkerCrashDetector()
        self.crashDetector = crashDetector


    def classify(self, command, output, error, panicOnly=False):
        if error is None:
            return InvocationResult(command, True, 0, False)

        code = getErrorCode(output)
        crashSuspected = (self.crashDetector.detect(getErrorText(error)) or
                          self.crashDetector.detect(utils.toText(output)))

        if crashSuspected:
            logging.info("%s: crash marker found: %s" % (command, str(error)))
        elif panicOnly:
            logging.debug("%s failed with code %d, no crash marker" % (command, code))

        return InvocationResult(command, False, code, crashSuspected)


    def wantsTranscript(self, result, panicOnly):
        """
        Should the invocation appear in the transcript.

        Successful invocations are always logged. In panicOnly mode,
        failures only if a crash marker was found.
        """
        if result.successful or not panicOnly:
            return True
        return result.crashSuspected
