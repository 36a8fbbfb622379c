#!/usr/bin/env python3
"""
run.py - Main entry point for the Cookies & Milk engine
"""

import sys

from cookiemilk.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
