"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers under the ``sentsplitter`` namespace.
    - Allow an optional verbose/debug mode for the command line.

Notes/Edge cases:
    - The package logger carries a ``NullHandler`` so library use stays quiet.
    - :func:`configure_logging` is idempotent; repeated calls replace the
      package handler rather than stacking a new one.

Dependencies:
    - Python `logging` module.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER = "sentsplitter"
_HANDLER_NAME = "sentsplitter-stderr"

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package namespace."""

    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    A handler left over from an earlier call is dropped without flushing,
    since the stream it holds may have been swapped out and closed.
    """

    logger = logging.getLogger(ROOT_LOGGER)
    level = logging.DEBUG if verbose else logging.WARNING
    for stale in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
        logger.removeHandler(stale)
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


__all__ = ["ROOT_LOGGER", "configure_logging", "get_logger"]
