"""Cleara: reclaim disk space on Linux."""

__version__ = "1.0"
