import json
import logging

from cnifuzz.errors import SeedConfigError


def getTemplateConfig(config):
    """Network config for the device in config["device"]."""
    netConf = {
        "cniVersion": config["cni_version"],
        "deviceID": config["device"],
        "name": config["net_name"],
        "spoofchk": config["spoofchk"],
        "type": config["net_type"],
    }
    return json.dumps(netConf, indent=4, sort_keys=True).encode('utf-8')


def loadSeedConfig(config):
    """
    The (unmodified) network config which will be mutated.

    A config file given by the user wins over the generated template.
    """
    if config.get("config"):
        logging.info("Seed config from file: " + config["config"])
        try:
            with open(config["config"], 'rb') as f:
                return f.read()
        except (IOError, OSError) as e:
            raise SeedConfigError("Could not read config %s: %s" % (config["config"], str(e)))

    if not config.get("device"):
        raise SeedConfigError("device has to be specified or config file has to be provided")

    return getTemplateConfig(config)
