class SessionTally(object):
    """
    Results of all plugin invocations of a fuzzing session.

    Owned by the CniFuzzer which fills it; handed to the Reporter at
    the end of the session. Only grows.
    """

    def __init__(self):
        self.sCalls = []  # type: List[InvocationResult]
        self.fCalls = []  # type: List[InvocationResult]
        self.crashCount = 0


    def addResult(self, result):
        if result.successful:
            self.sCalls.append(result)
        else:
            self.fCalls.append(result)
            if result.crashSuspected:
                self.crashCount += 1


    def getSuccessCount(self):
        return len(self.sCalls)


    def getFailCount(self):
        return len(self.fCalls)


    def getTotalCount(self):
        return len(self.sCalls) + len(self.fCalls)


    def getCrashCount(self):
        return self.crashCount


    def getInvocationCount(self, command):
        n = 0
        for r in self.sCalls + self.fCalls:
            if r.command == command:
                n += 1
        return n
