"""Logging setup shared by the library modules and the CLI."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "grid_identicon"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return a logger under the package namespace.

    The package root logger gets a single stderr handler the first time it
    is requested; child loggers (``grid_identicon.pattern`` etc.) propagate
    to it.
    """
    root = logging.getLogger(LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    return logging.getLogger(name)


def set_verbosity(verbose: bool) -> None:
    """Switch the package logger between INFO and DEBUG."""
    get_logger().setLevel(logging.DEBUG if verbose else logging.INFO)


__all__ = ["get_logger", "set_verbosity"]
