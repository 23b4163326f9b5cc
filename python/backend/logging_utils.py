"""Logger setup for the puzzle package."""

from __future__ import annotations

import logging

from backend import config


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a child of it when *name* is given.

    The package logger gets a console handler the first time it is asked
    for, unless the application already configured one.
    """
    root = logging.getLogger(config.LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(config.LOG_LEVEL)

    if name is None:
        return root
    return root.getChild(name)


def set_level(level: int) -> None:
    get_logger().setLevel(level)
