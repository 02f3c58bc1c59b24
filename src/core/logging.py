"""Logger setup. Every module simply does `from loguru import logger`; this only decides where the output goes."""

import sys
from typing import Optional, TextIO

from loguru import logger

DEFAULT_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "INFO", sink: Optional[TextIO] = None) -> None:
    """Replace loguru's default sink with a single sink (stderr unless given) at the requested level."""
    logger.remove()
    logger.add(sink or sys.stderr, level=level.upper(), format=DEFAULT_FORMAT)
