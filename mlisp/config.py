from __future__ import annotations
import logging
import os

# Defaults
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_RECURSION_LIMIT = 10_000


def get_log_level() -> int:
    raw = os.environ.get("MLISP_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    level = logging.getLevelName(raw.strip().upper())
    # getLevelName returns a "Level x" string for unknown names
    return level if isinstance(level, int) else logging.getLevelName(DEFAULT_LOG_LEVEL)


def get_recursion_limit() -> int:
    raw = os.environ.get("MLISP_RECURSION_LIMIT")
    if not raw:
        return DEFAULT_RECURSION_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        return DEFAULT_RECURSION_LIMIT
    return limit if limit > 0 else DEFAULT_RECURSION_LIMIT
