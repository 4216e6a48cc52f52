"""reclaim - find and remove project build artifacts to free disk space."""

__version__ = "0.1.0"
