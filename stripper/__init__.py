"""Select the entries of a directory tree that an ignore file would exclude."""

__version__ = "0.1.0"
