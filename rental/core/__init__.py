"""Shared constants, result type and logging setup."""
