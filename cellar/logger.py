"""Logger configuration using loguru."""
from pathlib import Path
from typing import Optional
import sys

from loguru import logger

from .config import settings

FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <magenta>cellar</magenta> <cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"


def setup_logging(level: str = "INFO", log_file: Optional[Path] = None) -> None:
    """Log to stderr, and to a rotating plain-text file when ``log_file`` is set."""
    logger.remove()
    logger.add(sys.stderr, format=FORMAT, level=level.upper(), colorize=True)
    if log_file is not None:
        logger.add(
            log_file,
            format=FORMAT,
            level=level.upper(),
            colorize=False,
            rotation="1 MB",
            retention=5,
            encoding="utf-8",
        )


setup_logging(settings.log_level, settings.log_file)

__all__ = ["logger", "setup_logging"]
