"""Root logger configuration for the command line interface."""

from __future__ import annotations

import logging
import sys


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Attach a stderr handler to the root logger once and set its level."""
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    if logger.handlers:  # don't double add on repeated calls
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
