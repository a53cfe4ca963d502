"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain namespaced loggers.
    - Allow an optional debug mode toggled from the CLI.

Notes/Edge cases:
    - Configuration is idempotent; repeated calls never stack handlers.
    - Records go to stderr so stdout stays reserved for candidate lines.
"""

from __future__ import annotations

import logging

__all__ = ["ROOT_LOGGER", "configure", "get_logger"]

ROOT_LOGGER = "masktools"
_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _root() -> logging.Logger:
    logger = logging.getLogger(ROOT_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.WARNING)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package namespace for ``name``."""

    root = _root()
    if name == ROOT_LOGGER or not name:
        return root
    if name.startswith(ROOT_LOGGER + "."):
        name = name[len(ROOT_LOGGER) + 1 :]
    return root.getChild(name)


def configure(debug: bool = False) -> logging.Logger:
    """Set the package log level; ``debug`` enables pool and skip records."""

    root = _root()
    root.setLevel(logging.DEBUG if debug else logging.WARNING)
    return root
