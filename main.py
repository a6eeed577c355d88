#!/usr/bin/env python3
"""Hecto - a small terminal text viewer.

Usage:
    python main.py [filename]

Controls:
    Arrow keys, Page Up/Down, Home/End: Navigate
    Ctrl-Q: Quit
"""

import sys
from hecto.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
