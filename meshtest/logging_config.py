"""
Logging setup for test suites that use the manifest builders.
"""

import logging
from typing import Optional

from .config import Settings, get_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure root logging from settings.

    Unknown level names fall back to INFO.

    Args:
        settings: Settings to read log_level from (default: cached settings)
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=LOG_FORMAT
    )
