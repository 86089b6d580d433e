"""Logging setup shared by the CLI and applications embedding the gateway."""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Install a root handler using LOG_FORMAT.

    Args:
        level: Level name (e.g. "DEBUG"); defaults to settings.log_level
    """
    if level is None:
        from rental.config import settings

        level = settings.log_level
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
