"""Tuning constants and environment lookups."""
import logging
import os

# Growable array sizing policy
DEFAULT_CAPACITY = 10
GROWTH_FACTOR = 1.5
SHRINK_THRESHOLD = 0.25

LOG_LEVEL_ENV = "DSATOOLKIT_LOG_LEVEL"


def get_log_level(default: int = logging.WARNING) -> int:
    """Resolve the log level from DSATOOLKIT_LOG_LEVEL (name or number)."""
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    # getLevelName returns "Level X" for unknown names
    if isinstance(level, int):
        return level
    return default
