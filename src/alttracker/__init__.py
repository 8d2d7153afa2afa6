"""Mule coin tracker: debounced balance updates to a remote endpoint."""

__version__ = "0.1.0"
