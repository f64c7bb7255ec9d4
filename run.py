#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four engine

Usage:
    python run.py play [--player1-color red] [--player2-color yellow]
    python run.py check --position 0,0,...,1,2
"""

import sys

from connectfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
