import logging
import os
import subprocess


def getCniEnvironment(command, invocationArgs):
    """The CNI protocol: everything but the network config is in the env."""
    env = os.environ.copy()
    env["CNI_COMMAND"] = command
    env["CNI_CONTAINERID"] = invocationArgs.containerId
    env["CNI_NETNS"] = invocationArgs.netns
    env["CNI_IFNAME"] = invocationArgs.ifName
    env["CNI_PATH"] = invocationArgs.path
    return env


def isLaunchError(error):
    """True if the plugin could not be started at all (not: it failed)."""
    return error is not None and not isinstance(error, subprocess.CalledProcessError)


class CniInvoker(object):
    """
    Runs the CNI plugin (the fuzzing target) for one command.

    One child process per call. Blocks until the plugin terminates, there
    is no timeout. Does not judge the outcome, see OutcomeClassifier.
    """

    def __init__(self, cniBin):
        self.cniBin = cniBin


    def invoke(self, command, invocationArgs):
        """
        Returns (output, error).

        output is stdout and stderr of the plugin combined, also if it
        failed. error is None if the plugin exited with 0, a
        CalledProcessError if it exited otherwise (or died), and an
        OSError if it could not be started.
        """
        env = getCniEnvironment(command, invocationArgs)
        popenArg = [ self.cniBin ]
        logging.debug("Invoke %s %s" % (command, str(popenArg)))

        try:
            p = subprocess.run(
                popenArg,
                input=invocationArgs.stdinData,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                env=env)
        except OSError as e:
            logging.warning("Could not start plugin %s: %s" % (self.cniBin, str(e)))
            return b'', e

        logging.debug("  Return code: " + str(p.returncode))
        if p.returncode != 0:
            error = subprocess.CalledProcessError(p.returncode, popenArg, output=p.stdout)
            return p.stdout, error

        return p.stdout, None
