import os
import sys
from typing import Optional

from loguru import logger

from domain.constants import LOG_LEVEL_ENV


def configure_logging(level: Optional[str] = None):
    """Install a single stderr sink. Safe to call on every Streamlit rerun."""
    if getattr(configure_logging, "_applied", False):
        return
    configure_logging._applied = True
    level = (level or os.environ.get(LOG_LEVEL_ENV) or 'INFO').upper()
    logger.remove()
    logger.add(sys.stderr, level=level,
               format="{time:HH:mm:ss} | {level: <7} | {name}:{function} - {message}")
