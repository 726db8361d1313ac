import re
import signal


class CrashSignalDetector(object):
    """Decides if a text (error or output of the plugin) indicates a crash."""

    def detect(self, text):
        raise NotImplementedError()


class MarkerCrashDetector(CrashSignalDetector):
    """
    Looks for crash markers, like a Go "panic", in the text.

    Case insensitive. A weak signal: the plugin may print the word for
    other reasons, and a crash may print nothing.
    """

    def __init__(self, markers=None):
        if markers is None:
            markers = [ 'panic' ]
        self.markers = [ m.lower() for m in markers ]


    def detect(self, text):
        if not text:
            return False
        text = text.lower()
        for marker in self.markers:
            if marker in text:
                return True
        return False


class SignalCrashDetector(CrashSignalDetector):
    """
    Detects if the plugin got killed by a signal.

    Works on the error text from getErrorText(), which is
    e.g. "died with <Signals.SIGSEGV: 11>".
    """

    DefaultSignals = [
        signal.SIGSEGV,
        signal.SIGABRT,
        signal.SIGBUS,
        signal.SIGILL,
        signal.SIGFPE,
    ]

    diedRe = re.compile(r'died with <Signals\.(SIG[A-Z0-9]+)')


    def __init__(self, signals=None):
        if signals is None:
            signals = self.DefaultSignals
        self.signalNames = set(s.name for s in signals)


    def detect(self, text):
        if not text:
            return False
        match = self.diedRe.search(text)
        if match is None:
            return False
        return match.group(1) in self.signalNames


class AnyCrashDetector(CrashSignalDetector):
    def __init__(self, detectors):
        self.detectors = detectors


    def detect(self, text):
        for detector in self.detectors:
            if detector.detect(text):
                return True
        return False


def getCrashDetector(config):
    """Create the crash detector selected by config["crash_detector"]."""
    name = config.get("crash_detector", "marker")

    if name == "marker":
        return MarkerCrashDetector(config.get("crash_markers"))
    elif name == "signal":
        return SignalCrashDetector()
    elif name == "any":
        return AnyCrashDetector([
            MarkerCrashDetector(config.get("crash_markers")),
            SignalCrashDetector(),
        ])
    else:
        raise ValueError("Unknown crash detector: " + str(name))
