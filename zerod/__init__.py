"""A non-blocking TCP listening server that accepts and tracks connections."""

__version__ = "0.1.0"