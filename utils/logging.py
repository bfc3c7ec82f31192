"""Logging setup shared by every reportflow module."""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: bool = False, level: Optional[int] = None) -> None:
    """Route all reportflow log records to stdout.

    Safe to call more than once; earlier root handlers are replaced.

    Args:
        verbose: DEBUG instead of INFO
        level: Explicit level, wins over ``verbose``
    """
    if level is None:
        level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Module logger; call with ``__name__``."""
    return logging.getLogger(name)


def log_banner(logger: logging.Logger, title: str, width: int = 60) -> None:
    """Log ``title`` between two separator lines."""
    rule = "=" * width
    logger.info(rule)
    logger.info(title)
    logger.info(rule)
