"""Logging setup.

The terminal is in raw mode and fully owned by the renderer while the editor
runs, so log records only ever go to a file.
"""

from __future__ import annotations

import logging

from femto.config import Config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(config: Config) -> logging.Logger:
    """Configure the ``femto`` logger from *config* and return it."""
    logger = logging.getLogger("femto")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if config.log_file:
        handler: logging.Handler = logging.FileHandler(config.log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()

    logger.addHandler(handler)
    logger.setLevel(getattr(logging, config.log_level.upper(), logging.WARNING))
    logger.propagate = False
    return logger
