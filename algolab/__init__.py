"""Classic data structures and algorithms with small command-line tools."""

__version__ = "0.1.0"