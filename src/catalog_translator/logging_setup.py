"""Logging configuration for the catalog_translator package."""

import logging
from typing import Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class PackageStreamHandler(logging.StreamHandler):
    """Stream handler installed by configure_logging."""


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Calling it again only updates the level.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = resolved

    logger = logging.getLogger("catalog_translator")
    logger.setLevel(level)
    if not any(isinstance(h, PackageStreamHandler) for h in logger.handlers):
        handler = PackageStreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
