"""certno: parse and format marriage certificate numbers."""

__version__ = "0.1.0"
