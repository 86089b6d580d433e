"""
Configuration package.

Exports the settings instance for easy importing.

Usage:
    from rental.config import settings

    print(settings.sqlalchemy_database_url)
"""

from rental.config.settings import Settings, settings, get_settings, print_settings

__all__ = [
    "Settings",
    "settings",
    "get_settings",
    "print_settings",
]
