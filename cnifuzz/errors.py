"""
Harness errors.

Everything in here means the environment of the fuzzing session is broken
(no mutator, no namespace, no log file...). These abort the session with
a distinct process exit code. Failures of the plugin under test are not
errors, they end up in the SessionTally.
"""


class HarnessError(Exception):
    exitcode = 1

    def __init__(self, msg, exitcode=None):
        super(HarnessError, self).__init__(msg)
        if exitcode is not None:
            self.exitcode = exitcode


class ConfigError(HarnessError):
    exitcode = 1


class LogFileError(HarnessError):
    exitcode = 2


class NamespaceSetupError(HarnessError):
    exitcode = 3


class SeedConfigError(HarnessError):
    exitcode = 4


class MutatorError(HarnessError):
    exitcode = 5


class DelInvocationError(HarnessError):
    exitcode = 6


class NamespaceTeardownError(HarnessError):
    exitcode = 7
