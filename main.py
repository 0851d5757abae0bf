"""
TapTempo - Main Entry Point

Measure a tempo in beats per minute by hitting the Enter key on each beat.
"""

import sys

from taptempo.cli import main

if __name__ == "__main__":
    sys.exit(main())
