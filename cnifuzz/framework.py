# cnifuzz - fuzz CNI plugins with malformed network configs

import logging
import argparse
import time

from cnifuzz.configmanager import ConfigManager
from cnifuzz.common.reporter import Reporter
from cnifuzz.common.seedconfig import loadSeedConfig
from cnifuzz.common.transcript import Transcript
from cnifuzz.errors import HarnessError, NamespaceTeardownError
from cnifuzz.fuzzer.cnifuzzer import CniFuzzer
from cnifuzz.mutator.mutatorinterface import MutatorInterface
from cnifuzz.target.cniinvoker import CniInvoker
from cnifuzz.target.crashdetector import getCrashDetector
from cnifuzz.target.linuxnamespace import LinuxNamespace
from cnifuzz.target.outcomeclassifier import OutcomeClassifier
from cnifuzz import utils


def getArgParser():
    parser = argparse.ArgumentParser("cnifuzz")

    parser.add_argument('--config', help='Config to be used (device value would be ignored if specified)')
    parser.add_argument('--device', help='Test device PCI address')
    parser.add_argument('--cni', help='Path to CNI executable')
    parser.add_argument('--tests', help='Number of tests to conduct', type=int)
    parser.add_argument('--out', help='Log file path for the invocation transcript')
    parser.add_argument('--panicOnly', help='Log only failures with a crash marker (e.g. Go panics)', action="store_true")

    parser.add_argument('--mutator', help='Mutator to use, can be given multiple times', action="append")
    parser.add_argument('--crashdetector', help='Crash detection: marker, signal or any')
    parser.add_argument('--containerid', help='CNI_CONTAINERID to use')
    parser.add_argument('--ifname', help='CNI_IFNAME to use')
    parser.add_argument('--netns', help='Use this existing network namespace (path)')
    parser.add_argument('--hexdump', help='Write the input data as hexdump to the log', action="store_true")
    parser.add_argument('--statsfile', help='Write statistics to this file at the end')
    parser.add_argument('--settings', help='Settings file (python dict)')

    parser.add_argument('--debug', help='More log messages', action="store_true")
    parser.add_argument('--adddebuglogfile', help='Will write a debug log file', action="store_true")

    return parser


def realMain(argv=None):
    parser = getArgParser()
    args = parser.parse_args(argv)

    if args.adddebuglogfile:
        utils.setupLoggingWithFile()
    else:
        utils.setupLoggingStandard(args.debug)

    configManager = ConfigManager()
    try:
        config = configManager.loadConfigByArgs(args)
        configManager.checkRequirements(config)
        cniFuzz(config)
    except HarnessError as e:
        print("error: " + str(e))
        return e.exitcode

    return 0


def cniFuzz(config):
    """Run a complete fuzzing session and print the summary."""
    seedData = loadSeedConfig(config)

    mutator = MutatorInterface(config)
    invoker = CniInvoker(config["cni_bin"])
    classifier = OutcomeClassifier(getCrashDetector(config))
    startTime = int(time.time())

    with Transcript(config["log_file"], config["transcript_hexdump"]) as transcript:
        namespace = None
        if config["netns"]:
            netns = config["netns"]
        else:
            namespace = LinuxNamespace(config["namespace_id"])
            netns = namespace.create()
        logging.info("Using network namespace: " + netns)

        cniFuzzer = CniFuzzer(config, mutator, invoker, classifier, transcript)
        aborted = True
        try:
            tally = cniFuzzer.doFuzz(seedData, netns)
            aborted = False
        finally:
            if namespace is not None:
                try:
                    namespace.cleanup()
                except NamespaceTeardownError as e:
                    if not aborted:
                        raise
                    # the original error is the one to report
                    logging.error("After abort: " + str(e))

    reporter = Reporter(config["log_file"])
    print(reporter.summarize(tally))

    if config["stats_file"]:
        reporter.writeStatsFile(tally, config["stats_file"], startTime)

    return tally


def main():
    return realMain()
