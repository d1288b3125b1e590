"""A terminal system monitor reading CPU, memory, battery and disk statistics on Linux."""

__version__ = "0.1.0"