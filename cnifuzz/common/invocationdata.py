from collections import namedtuple


CMD_ADD = 'ADD'
CMD_DEL = 'DEL'


# Everything the plugin gets from us for one ADD/DEL pair.
# The DEL gets the very same instance as its ADD.
InvocationArgs = namedtuple(
    'InvocationArgs',
    [ 'containerId', 'netns', 'ifName', 'path', 'stdinData' ])


# Outcome of a single plugin call.
# crashSuspected is only a hint for the transcript, it does not
# influence successful.
_InvocationResult = namedtuple(
    'InvocationResult',
    [ 'command', 'successful', 'code', 'crashSuspected' ])


class InvocationResult(_InvocationResult):
    __slots__ = ()

    def __new__(cls, command, successful, code=0, crashSuspected=False):
        return super(InvocationResult, cls).__new__(
            cls, command, successful, code, crashSuspected)


    def getStatusStr(self):
        if self.successful:
            return 'SUCCESS'
        else:
            return 'FAIL'
