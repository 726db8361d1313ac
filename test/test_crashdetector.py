#!/usr/bin/env python

import signal
import subprocess
import unittest

from cnifuzz.target.crashdetector import (
    MarkerCrashDetector, SignalCrashDetector, AnyCrashDetector, getCrashDetector)
from cnifuzz.target.outcomeclassifier import getErrorText
import testutils


class CrashDetectorTest(unittest.TestCase):
    def test_marker(self):
        detector = MarkerCrashDetector()
        self.assertTrue(detector.detect("panic: runtime error"))
        self.assertTrue(detector.detect("Go PANIC"))
        self.assertFalse(detector.detect("invalid config"))
        self.assertFalse(detector.detect(""))
        self.assertFalse(detector.detect(None))


    def test_custommarkers(self):
        detector = MarkerCrashDetector([ 'AddressSanitizer', 'fatal error' ])
        self.assertTrue(detector.detect("==1==ERROR: addresssanitizer: heap-buffer-overflow"))
        self.assertTrue(detector.detect("fatal error: concurrent map writes"))
        self.assertFalse(detector.detect("panic"))


    def test_signal(self):
        detector = SignalCrashDetector()
        segv = subprocess.CalledProcessError(-signal.SIGSEGV, [ 'sriov' ])
        kill = subprocess.CalledProcessError(-signal.SIGKILL, [ 'sriov' ])
        exit1 = subprocess.CalledProcessError(1, [ 'sriov' ])

        self.assertTrue(detector.detect(getErrorText(segv)))
        self.assertFalse(detector.detect(getErrorText(kill)))
        self.assertFalse(detector.detect(getErrorText(exit1)))
        self.assertFalse(detector.detect("panic"))


    def test_any(self):
        detector = AnyCrashDetector([ MarkerCrashDetector(), SignalCrashDetector() ])
        segv = subprocess.CalledProcessError(-signal.SIGABRT, [ 'sriov' ])
        self.assertTrue(detector.detect(getErrorText(segv)))
        self.assertTrue(detector.detect("panic"))
        self.assertFalse(detector.detect("invalid"))


    def test_getcrashdetector(self):
        config = testutils.getConfig()
        self.assertIsInstance(getCrashDetector(config), MarkerCrashDetector)

        config = testutils.getConfig(crash_detector="signal")
        self.assertIsInstance(getCrashDetector(config), SignalCrashDetector)

        config = testutils.getConfig(crash_detector="any")
        self.assertIsInstance(getCrashDetector(config), AnyCrashDetector)

        config = testutils.getConfig(crash_detector="magic")
        with self.assertRaises(ValueError):
            getCrashDetector(config)


if __name__ == '__main__':
    unittest.main()
