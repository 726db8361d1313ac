#!/usr/bin/env python

import subprocess
import unittest
from unittest import mock

from cnifuzz.errors import MutatorError
from cnifuzz.mutator.mutator_dumb import MutatorDumb
from cnifuzz.mutator import mutatorinterface
from cnifuzz.mutator.mutatorinterface import MutatorInterface
import testutils


class MutatorDumbTest(unittest.TestCase):
    def test_mutate(self):
        mutator = MutatorDumb(42)
        data = testutils.SeedConfig * 10

        n = 0
        while n < 20:
            mutated = mutator.mutate(data)
            # all dumb mutations keep the size
            self.assertEqual(len(mutated), len(data))
            self.assertIsInstance(mutated, bytes)
            n += 1


    def test_empty(self):
        self.assertEqual(MutatorDumb(1).mutate(b''), b'')


    def test_singlebyte(self):
        mutated = MutatorDumb(1).mutate(b'{')
        self.assertEqual(len(mutated), 1)


class MutatorInterfaceTest(unittest.TestCase):
    def test_dumb(self):
        config = testutils.getConfig(mutator=[ 'Dumb' ])
        self.assertTrue(mutatorinterface.testMutatorConfig(config))

        mutatorInterface = MutatorInterface(config)
        mutated = mutatorInterface.mutate(testutils.SeedConfig)
        self.assertEqual(len(mutated), len(testutils.SeedConfig))


    def test_unknownmutator(self):
        config = testutils.getConfig(mutator=[ 'Nope' ])
        self.assertFalse(mutatorinterface.testMutatorConfig(config))

        with self.assertRaises(MutatorError):
            MutatorInterface(config).mutate(testutils.SeedConfig)


    def test_nomutator(self):
        config = testutils.getConfig(mutator=[])
        self.assertFalse(mutatorinterface.testMutatorConfig(config))


    @mock.patch('cnifuzz.mutator.mutatorinterface.shutil.which', return_value=None)
    def test_radamsanotinstalled(self, whichMock):
        config = testutils.getConfig(mutator=[ 'Radamsa' ])
        self.assertFalse(mutatorinterface.testMutatorConfig(config))
        whichMock.assert_called_with('radamsa')


    @mock.patch('cnifuzz.mutator.mutatorinterface.subprocess.run')
    def test_radamsa(self, runMock):
        runMock.return_value = subprocess.CompletedProcess(
            [ 'radamsa' ], 0, stdout=b'{"cniVersion":"0.3.0"""', stderr=b'')
        config = testutils.getConfig(mutator=[ 'Radamsa' ])
        mutatorInterface = MutatorInterface(config)

        mutated = mutatorInterface.mutate(testutils.SeedConfig)
        self.assertEqual(mutated, b'{"cniVersion":"0.3.0"""')

        args, kwargs = runMock.call_args
        self.assertEqual(args[0], [ 'radamsa', '-s', mutatorInterface.seed ])
        self.assertEqual(kwargs['input'], testutils.SeedConfig)


    @mock.patch('cnifuzz.mutator.mutatorinterface.subprocess.run')
    def test_mutatorfails(self, runMock):
        runMock.return_value = subprocess.CompletedProcess(
            [ 'radamsa' ], 1, stdout=b'', stderr=b'out of memory')
        config = testutils.getConfig(mutator=[ 'Radamsa' ])

        with self.assertRaises(MutatorError) as cm:
            MutatorInterface(config).mutate(testutils.SeedConfig)
        self.assertEqual(cm.exception.exitcode, 5)
        self.assertIn('out of memory', str(cm.exception))


    @mock.patch('cnifuzz.mutator.mutatorinterface.subprocess.run',
                side_effect=FileNotFoundError(2, 'No such file or directory'))
    def test_mutatornotfound(self, runMock):
        config = testutils.getConfig(mutator=[ 'Zzuf' ])
        with self.assertRaises(MutatorError):
            MutatorInterface(config).mutate(testutils.SeedConfig)


    @mock.patch('cnifuzz.mutator.mutatorinterface.subprocess.run')
    def test_roundrobin(self, runMock):
        runMock.return_value = subprocess.CompletedProcess(
            [ 'zzuf' ], 0, stdout=b'zzuf', stderr=b'')
        config = testutils.getConfig(mutator=[ 'Zzuf', 'Dumb' ])
        mutatorInterface = MutatorInterface(config)

        self.assertEqual(mutatorInterface.mutate(b'abcd'), b'zzuf')
        self.assertEqual(len(mutatorInterface.mutate(b'abcd')), 4)
        self.assertEqual(mutatorInterface.mutate(b'abcd'), b'zzuf')
        self.assertEqual(runMock.call_count, 2)


if __name__ == '__main__':
    unittest.main()
