#!/usr/bin/env python3

import sys

from cnifuzz import framework

"""
Fuzz a CNI plugin, e.g.:

  ./fuzzcni.py --device 0000:03:02.0 --cni /opt/cni/bin/sriov --tests 1000
"""


def main():
    return framework.realMain()


if __name__ == '__main__':
    sys.exit(main())
