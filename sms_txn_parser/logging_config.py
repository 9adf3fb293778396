"""Logging setup for the parser service and batch CLI."""

import logging
import sys
from typing import Optional

from .config import config


def setup_logging(log_level: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger with a console handler.

    Args:
        log_level: Logging level name; defaults to ``config.LOG_LEVEL``.

    Returns:
        The configured ``sms_txn_parser`` logger.
    """
    level = getattr(logging, (log_level or config.LOG_LEVEL).upper(), logging.INFO)

    logger = logging.getLogger("sms_txn_parser")
    logger.setLevel(level)

    # Clear any existing handlers (in case this is called multiple times)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT))
    logger.addHandler(handler)

    return logger
