import logging
import os
import subprocess

from nsenter import Namespace

from cnifuzz.errors import NamespaceSetupError, NamespaceTeardownError


class LinuxNamespace(object):
    """
    The network namespace the CNI plugin gets as CNI_NETNS.

    Created once before fuzzing, deleted once after. We never touch it
    in between, only the plugin does.
    """

    def __init__(self, myid=0):
        self.namespaceName = 'cnifuzz-' + str(myid)
        self.namespacePath = '/var/run/netns/' + self.namespaceName


    def getPath(self):
        return self.namespacePath


    def create(self):
        if os.geteuid() != 0:
            raise NamespaceSetupError("Namespaces can only be used if you are root")

        # delete namespace if it already exists (old session)
        # so the commands below do not generate errors
        if os.path.isfile(self.namespacePath):
            logging.info("Namespace exists already, delete: " + self.namespaceName)
            self._ip([ 'netns', 'del', self.namespaceName ], NamespaceSetupError)

        logging.info("Create namespace: " + self.namespaceName)
        self._ip([ 'netns', 'add', self.namespaceName ], NamespaceSetupError)

        # namespace is naked - add loopback interface
        try:
            with Namespace(self.namespacePath, 'net'):
                self._ip([ 'link', 'set', 'dev', 'lo', 'up' ], NamespaceSetupError)
        except OSError as e:
            raise NamespaceSetupError("Could not enter namespace %s: %s" % (
                self.namespacePath, str(e)))

        return self.namespacePath


    def cleanup(self):
        if not os.path.isfile(self.namespacePath):
            raise NamespaceTeardownError("Namespace does not exist: " + self.namespacePath)

        logging.info("Delete namespace: " + self.namespaceName)
        self._ip([ 'netns', 'del', self.namespaceName ], NamespaceTeardownError)


    def _ip(self, args, errorClass):
        cmd = [ 'ip' ]
        cmd.extend(args)
        try:
            subprocess.run(cmd, check=True, stdout=subprocess.PIPE, stderr=subprocess.STDOUT)
        except (OSError, subprocess.CalledProcessError) as e:
            output = getattr(e, 'output', None)
            msg = "%s: %s" % (' '.join(cmd), str(e))
            if output:
                msg += " " + output.decode('utf-8', errors='replace').strip()
            raise errorClass(msg)
