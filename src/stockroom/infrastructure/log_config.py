"""Logging setup for the command-line entry point.

Library modules only ever call ``logging.getLogger(__name__)``; handlers
are attached here, once, by whoever owns the process.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV_VAR = "STOCKROOM_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_ROOT_LOGGER = "stockroom"


class _StderrHandler(logging.StreamHandler):
    """Marker type so repeated setup calls reuse one handler."""


def resolve_level(verbose: bool = False) -> int:
    if verbose:
        return logging.INFO
    name = os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING").upper()
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for names it does not know
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger. Safe to call twice."""
    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(resolve_level(verbose))
    for handler in logger.handlers:
        if isinstance(handler, _StderrHandler):
            # sys.stderr may have been swapped since the last call
            handler.stream = sys.stderr
            return logger
    handler = _StderrHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
