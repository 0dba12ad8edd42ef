#!/usr/bin/env python3
"""Item admin tool.

Run this file to inspect the configured items:
    python run.py list
"""

import sys

from rpginventory.cli import main

if __name__ == "__main__":
    sys.exit(main())
