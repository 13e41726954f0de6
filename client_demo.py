#!/usr/bin/env python3
#
# PROJECT: isocube
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import os
import sys

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from isocube.cli import main


if __name__ == "__main__":
    sys.exit(main())
