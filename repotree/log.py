"""Diagnostic logging setup.

Warnings and errors go to stderr through the ``repotree`` logger hierarchy so
stdout carries only tree rows.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOGGER_NAME = "repotree"
LOG_FORMAT = "%(levelname)s: %(message)s"

_HANDLER_ATTR = "_repotree_handler"


def configure_logging(verbose: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """Attach one stderr handler to the package logger and set its level.

    Repeated calls replace the previously installed handler instead of
    stacking duplicates.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    setattr(handler, _HANDLER_ATTR, True)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger
