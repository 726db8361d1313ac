import ast
import logging
import os

from cnifuzz.mutator.mutatorinterface import testMutatorConfig
from cnifuzz.target.crashdetector import getCrashDetector
from cnifuzz.errors import ConfigError
from cnifuzz import defaultconfig


# command line argument -> config key
ArgsConfigMap = {
    'device': 'device',
    'config': 'config',
    'cni': 'cni_bin',
    'tests': 'tests',
    'out': 'log_file',
    'mutator': 'mutator',
    'crashdetector': 'crash_detector',
    'containerid': 'container_id',
    'ifname': 'ifname',
    'netns': 'netns',
    'statsfile': 'stats_file',
}


class ConfigManager(object):
    def __init__(self):
        self.config = None


    def _isRoot(self):
        return os.geteuid() == 0


    def checkRequirements(self, config):
        """Raises ConfigError if we cannot fuzz with this config."""
        if not config["device"] and not config["config"]:
            raise ConfigError("device has to be specified or config file has to be provided")

        if not os.path.isfile(config["cni_bin"]):
            raise ConfigError("CNI binary not found: " + str(config["cni_bin"]))

        if not os.access(config["cni_bin"], os.X_OK):
            raise ConfigError("CNI binary not executable: " + str(config["cni_bin"]))

        if config["tests"] < 0:
            raise ConfigError("Number of tests must not be negative: " + str(config["tests"]))

        if not testMutatorConfig(config):
            raise ConfigError("Mutator not usable: " + str(config["mutator"]))

        try:
            getCrashDetector(config)
        except ValueError as e:
            raise ConfigError(str(e))

        if not config["netns"] and not self._isRoot():
            raise ConfigError(
                'Creating the network namespace requires root. '
                'Run as root, or use --netns with an existing namespace.')

        return True


    def loadConfigByFile(self, configfilename):
        """Settings file: a python dict literal, overwriting the defaults."""
        if not os.path.isfile(configfilename):
            raise ConfigError("Settings file does not exist: " + configfilename)

        with open(configfilename, 'r') as f:
            rawData = f.read()

        try:
            pyData = ast.literal_eval(rawData)
        except (ValueError, SyntaxError) as e:
            raise ConfigError("Invalid settings file %s: %s" % (configfilename, str(e)))

        if not isinstance(pyData, dict):
            raise ConfigError("Settings file is not a dict: " + configfilename)

        return self._loadConfig(pyData)


    def loadConfigByDict(self, pyData):
        return self._loadConfig(pyData)


    def loadConfigByArgs(self, args):
        """Defaults, then --settings file, then the other arguments."""
        pyData = {}
        if getattr(args, 'settings', None):
            pyData = self.loadConfigByFile(args.settings)

        for argName in ArgsConfigMap:
            value = getattr(args, argName, None)
            if value is not None:
                pyData[ ArgsConfigMap[argName] ] = value

        if getattr(args, 'panicOnly', False):
            pyData['panic_only'] = True
        if getattr(args, 'hexdump', False):
            pyData['transcript_hexdump'] = True
        if getattr(args, 'debug', False):
            pyData['debug'] = True

        return self._loadConfig(pyData)


    def _loadConfig(self, pyData):
        config = defaultconfig.DefaultConfig.copy()

        for key in pyData:
            if key not in config:
                logging.warning("Unknown configuration directive: " + str(key))
            config[key] = pyData[key]

        self.config = config
        return config
