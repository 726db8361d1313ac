import random
import logging
import shutil
import subprocess
import sys

from cnifuzz.mutator.mutator_list import mutators
from cnifuzz.mutator.mutator_dumb import MutatorDumb
from cnifuzz.errors import MutatorError
from cnifuzz import utils


def str_to_class(classname):
    return getattr(sys.modules[__name__], classname, None)


def testMutatorConfig(config):
    """
    Test if config for mutator is ok.

    Checks if all configured mutators are known, and if external ones
    can be found in $PATH.
    """
    if not config['mutator']:
        logging.error("No mutator configured")
        return False

    for mutator in config['mutator']:
        if mutator not in mutators:
            logging.error("Could not find mutator with name: " + str(mutator))
            return False
        mutatorData = mutators[ mutator ]

        # class/file
        if 'class' in mutatorData:
            if not str_to_class(mutatorData['class']):
                logging.error("Class does not exist: " + mutatorData['class'])
                return False
        elif 'file' in mutatorData:
            if shutil.which(mutatorData["file"]) is None:
                logging.error("Could not find mutator binary: " + mutatorData["file"])
                return False
        else:
            logging.error("Mutator is neither file or class")
            return False

    return True


class MutatorInterface(object):
    """
    Turns the seed config into a malformed one.

    The mutators know nothing about the data. A mutator which cannot be
    run is fatal: we would otherwise fuzz the plugin with the unmodified
    seed without anyone noticing.
    """

    def __init__(self, config):
        self.config = config
        self.seed = None
        self.mutatorClassInstances = {}
        self.currentMutatorIndex = 0


    def _generateSeed(self):
        self.seed = str(random.randint(0, 2**64 - 1))


    def mutate(self, data):
        self._generateSeed()

        mutatorChoice = self.config['mutator'][self.currentMutatorIndex]
        self.currentMutatorIndex = (self.currentMutatorIndex + 1) % len(self.config['mutator'])

        if mutatorChoice not in mutators:
            raise MutatorError("Could not find mutator with name: " + str(mutatorChoice))
        mutatorData = mutators[ mutatorChoice ]

        if 'file' in mutatorData:
            mutatedData = self._mutateFile(data, mutatorData)
        elif 'class' in mutatorData:
            mutatedData = self._mutateClass(data, mutatorData)
        else:
            raise MutatorError("Mutator is neither file or class: " + mutatorChoice)

        logging.debug("Mutated data: " + utils.cap(utils.toText(mutatedData), 64))
        return mutatedData


    def _mutateClass(self, data, mutatorData):
        # each mutator is only instantiated once, seeded with the first seed
        if mutatorData['class'] not in self.mutatorClassInstances:
            mutatorClass = str_to_class(mutatorData['class'])
            if mutatorClass is None:
                raise MutatorError("Class does not exist: " + mutatorData['class'])
            self.mutatorClassInstances[ mutatorData['class'] ] = mutatorClass(self.seed)

        return self.mutatorClassInstances[ mutatorData['class'] ].mutate(data)


    def _mutateFile(self, data, mutatorData):
        """Call external mutator, data via stdin, result via stdout."""
        logging.info("Call mutator " + mutatorData['name'] + ", seed: " + self.seed)

        args = [ mutatorData['file'] ]
        for arg in mutatorData['args']:
            args.append(arg % { "seed": self.seed })
        logging.debug("Mutator command args: " + str(args))

        try:
            p = subprocess.run(
                args,
                input=data,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE)
        except OSError as e:
            raise MutatorError("Could not run mutator %s: %s" % (mutatorData['file'], str(e)))

        if p.returncode != 0:
            raise MutatorError("Mutator %s failed with exit code %d: %s" % (
                mutatorData['file'], p.returncode, utils.toText(p.stderr).strip()))

        return p.stdout
