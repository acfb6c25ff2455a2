"""cmdterm - a line-oriented command terminal."""

__version__ = "0.1.0"
