"""
Main entry point for SmurfScan.

Usage: python main.py <GameName#TagLine>
"""

import sys

from smurfscan.cli import main

if __name__ == "__main__":
    sys.exit(main())
