import logging
import os
import time

from cnifuzz.common.invocationdata import InvocationArgs, CMD_ADD, CMD_DEL
from cnifuzz.common.sessiontally import SessionTally
from cnifuzz.errors import DelInvocationError
from cnifuzz.target.cniinvoker import isLaunchError


class CniFuzzer(object):
    """
    The main fuzzing loop.

    For every iteration: mutate the seed, ADD it. If the plugin accepted
    it, DEL it again with exactly the same arguments, so the namespace is
    clean for the next iteration. A failed ADD created nothing, so there
    is nothing to DEL.

    Iterations are strictly sequential, they all share one namespace.
    """

    def __init__(self, config, mutator, invoker, classifier, transcript, tally=None):
        self.config = config
        self.mutator = mutator
        self.invoker = invoker
        self.classifier = classifier
        self.transcript = transcript
        if tally is None:
            tally = SessionTally()
        self.tally = tally
        self.panicOnly = config.get("panic_only", False)

        self.iterStats = {
            "count": 0,  # number of iterations
            "startTime": time.time(),
        }


    def getInvocationArgs(self, netns, stdinData):
        return InvocationArgs(
            containerId=self.config["container_id"],
            netns=netns,
            ifName=self.config["ifname"],
            path=os.path.dirname(self.config["cni_bin"]),
            stdinData=stdinData)


    def doFuzz(self, seedData, netns, tests=None):
        if tests is None:
            tests = self.config["tests"]

        logging.info("Start fuzzing, %d iterations" % tests)
        self.iterStats["startTime"] = time.time()

        n = 0
        while n < tests:
            self.doIteration(seedData, netns)
            self.updateStats()
            n += 1

        logging.info("Fuzzing finished")
        return self.tally


    def doIteration(self, seedData, netns):
        malformed = self.mutator.mutate(seedData)
        invocationArgs = self.getInvocationArgs(netns, malformed)

        addResult, addError = self._call(CMD_ADD, invocationArgs)
        if not addResult.successful:
            return

        # If ADD was successful, DEL what it created
        delResult, delError = self._call(CMD_DEL, invocationArgs)
        if isLaunchError(delError):
            raise DelInvocationError("Could not run DEL: " + str(delError))

        if not delResult.successful and self.config.get("abort_on_del_failure", True):
            raise DelInvocationError(
                "DEL failed after successful ADD, namespace may be dirty: " + str(delError))


    def _call(self, command, invocationArgs):
        output, error = self.invoker.invoke(command, invocationArgs)
        result = self.classifier.classify(command, output, error, self.panicOnly)
        self.tally.addResult(result)

        if self.classifier.wantsTranscript(result, self.panicOnly):
            self.transcript.write(result, invocationArgs, output, error)

        return result, error


    def updateStats(self):
        self.iterStats["count"] += 1
        interval = self.config.get("stats_interval")
        if not interval or self.iterStats["count"] % interval != 0:
            return

        diffTime = time.time() - self.iterStats["startTime"]
        fuzzPerSec = 0.0
        if diffTime > 0:
            fuzzPerSec = float(self.iterStats["count"]) / diffTime

        logging.info("It: %8d  Fail: %8d  Crashes: %5d  Fuzz/s: %4.2f" % (
            self.iterStats["count"],
            self.tally.getFailCount(),
            self.tally.getCrashCount(),
            fuzzPerSec))
