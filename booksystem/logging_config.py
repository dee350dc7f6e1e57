"""
Logging setup for applications and scripts that use booksystem.

The library only creates module loggers; handlers are installed here,
on request, by the host.
"""

import logging
from typing import Optional

from .config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure the root logger from ``settings`` (or the environment).

    Args:
        settings: Settings to apply; defaults to get_settings()
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=settings.log_format,
        force=True,
    )
    logging.getLogger(__name__).debug(
        "Logging configured at level %s", settings.log_level
    )
