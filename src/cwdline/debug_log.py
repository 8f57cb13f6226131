"""Logging setup for the cwdline command line.

Library modules log through ``logging.getLogger(__name__)``; only the CLI
attaches a handler, so embedding applications keep control of output.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "cwdline"
LOG_FORMAT = "%(name)s: %(message)s"

_handler: logging.StreamHandler | None = None


def setup_logging(*, verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the ``cwdline`` logger.

    This is idempotent - later calls only adjust the level and point the
    handler at the current ``sys.stderr``.
    """
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if _handler is not None:
        _handler.setStream(sys.stderr)
        return logger

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    return logger
