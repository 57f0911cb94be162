"""Logging configuration helpers."""
from __future__ import annotations

import logging

FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO", console: bool = True) -> None:
    """Attach a formatted stream handler to the root logger.

    The library itself only logs; applications call this once at startup.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    handlers: list[logging.Handler] = []
    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(logging.Formatter(fmt=FORMAT, datefmt=DATEFMT))
        handlers.append(console_handler)
    else:
        handlers.append(logging.NullHandler())
    logging.basicConfig(level=log_level, handlers=handlers, force=True)
