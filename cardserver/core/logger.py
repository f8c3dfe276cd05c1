"""
cardserver/core/logger.py

Centralised logging configuration.
Every module should obtain its logger via:

    from cardserver.core.logger import get_logger
    logger = get_logger(__name__)

uvicorn is started with ``log_config=None`` (see cardserver/__main__.py),
so its own loggers propagate here and share one format with ours.
"""

import logging
import sys
from cardserver.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def log_level() -> int:
    """Level for the whole process, driven by ``settings.debug``."""
    return logging.DEBUG if settings.debug else logging.INFO


def _build_handler() -> logging.StreamHandler:
    """Return a stdout handler with a structured, readable format."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level())
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _configure_root_logger() -> None:
    """Configure the root logger once at import time."""
    root = logging.getLogger()
    if root.handlers:
        # Already configured (e.g. by a test framework) — leave it alone.
        return

    root.setLevel(log_level())
    root.addHandler(_build_handler())

    # The asset controller logs one line per request already.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


_configure_root_logger()


def get_logger(name: str) -> logging.Logger:
    """
    Return a named logger.

    >>> logger = get_logger(__name__)
    >>> logger.info("Serving %s", "/style.css")
    """
    return logging.getLogger(name)
