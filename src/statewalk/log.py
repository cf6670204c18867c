"""Logging helpers.

Library modules log through ``logging.getLogger(__name__)``; the ``debug``
flags on StateMachine, ModelBuilder and WalkConfig only move the level of
the ``statewalk`` logger.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def set_debug(enabled: bool) -> None:
    """Turn DEBUG records of the statewalk logger on or off."""
    logging.getLogger("statewalk").setLevel(logging.DEBUG if enabled else logging.NOTSET)


def setup_logging(verbose: bool) -> None:
    """Configure root logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    set_debug(verbose)
