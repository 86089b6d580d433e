"""
Application-wide constants.

Centralize sentinels and stored flag values here.
"""

from enum import Enum


# ========================================
# Sentinels
# ========================================

NO_RENTER_ID = -1
"""Stored in vehicles.curr_user_id while nobody is renting the vehicle."""

FAILED_USER_ID = -1
"""Returned by add_user when no id could be obtained."""


# ========================================
# Taken Flag
# ========================================

TAKEN = 1
NOT_TAKEN = 0


# ========================================
# Error Kinds
# ========================================

class ErrorKind(str, Enum):
    """
    Coarse failure categories reported by the repository.

    Usage:
        result = repository.delete_user(7)
        if result.error_kind == ErrorKind.CONNECTIVITY_OR_STATEMENT:
            ...
    """

    CONNECTIVITY_OR_STATEMENT = "CONNECTIVITY_OR_STATEMENT"
    """Connection refused, bad SQL, constraint violation or malformed row."""

    UNSUPPORTED = "UNSUPPORTED"
    """The operation exists but is intentionally not implemented."""
