"""clive - keyboard driven image browser."""

__version__ = "0.3.0"
