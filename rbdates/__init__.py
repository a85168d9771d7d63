"""Red-black tree with a text rendering, a simple comparable date-time value, and a demo command."""

__version__ = "0.1.0"