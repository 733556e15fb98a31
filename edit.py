#!/usr/bin/python3

"""
Entry point script for cedit.
"""

import sys

from src.cedit.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
