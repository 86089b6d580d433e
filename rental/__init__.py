"""Data-access layer for the vehicle rental database."""

__version__ = "0.1.0"
