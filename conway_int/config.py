# conway_int/config.py
"""
Environment-driven configuration, read once at import time.

    CONWAY_INT_STEP_COUNT=1          enable primitive step accounting
    CONWAY_INT_DISPLAY_MAX_DEPTH=n   default display depth (0 = unlimited)

A value that is not a non-negative integer is ignored (with a warning)
and the default is used, so a bad environment never breaks the import.
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)


def parse_depth(raw: str | None, name: str = "CONWAY_INT_DISPLAY_MAX_DEPTH") -> int:
    """Parse a depth flag; anything but a non-negative integer means 0."""
    if raw is None or not raw.strip():
        return 0
    try:
        value = int(raw)
    except ValueError:
        logger.warning("ignoring %s=%r: not an integer", name, raw)
        return 0
    if value < 0:
        logger.warning("ignoring %s=%r: negative", name, raw)
        return 0
    return value


STEP_COUNT_ENABLED = os.environ.get("CONWAY_INT_STEP_COUNT", "0") == "1"

DISPLAY_MAX_DEPTH = parse_depth(os.environ.get("CONWAY_INT_DISPLAY_MAX_DEPTH"))


def display_max_depth() -> int | None:
    """Default ``max_depth`` for display rendering, or None if unlimited."""
    return DISPLAY_MAX_DEPTH if DISPLAY_MAX_DEPTH > 0 else None
