"""TapTempo - Tap Tempo Measurement Tool.

A small interactive application that estimates a tempo in beats per minute
from the rhythm of Enter keypresses typed on the terminal.
"""

__version__ = "1.0.0"
