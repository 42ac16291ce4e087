"""Centralized logger configuration.

Usage:
    from gazie.utils.logger import get_logger
    logger = get_logger(__name__)

The curses UI owns the terminal while the app runs, so the entry point
routes log records to a file. Without a file, records go to stderr.
"""
import logging
import os
from typing import Optional

DEFAULT_LEVEL = os.getenv("GAZIE_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(
    level: str = DEFAULT_LEVEL, log_file: Optional[str] = None, *, silent: bool = False
) -> None:
    """Configure the root logger.

    `silent` discards every record; used when the UI owns the terminal and
    no log file can be opened.
    """
    handlers = None
    if silent:
        handlers = [logging.NullHandler()]
    elif log_file:
        os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
        handlers = [logging.FileHandler(log_file, encoding="utf-8")]
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=handlers is not None,
    )


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
