"""Tunable constants, read once from the environment at import time."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

HELPER_GRACE_MS_ENV = "TREE_KILLER_HELPER_GRACE_MS"
NATIVE_KILL_TIMEOUT_MS_ENV = "TREE_KILLER_NATIVE_KILL_TIMEOUT_MS"
DEFAULT_WAIT_MS_ENV = "TREE_KILLER_DEFAULT_WAIT_MS"


def env_milliseconds(name: str, default: int) -> int:
    """Read a positive millisecond count from the environment.

    Missing, malformed and non-positive values fall back to ``default``.
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %d", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive, using %d", name, raw, default)
        return default
    return value


# Helpers (pgrep, kill) are near-instant; anything slower is treated as hung.
HELPER_GRACE_PERIOD: float = env_milliseconds(HELPER_GRACE_MS_ENV, 50) / 1000.0
NATIVE_KILL_TIMEOUT: float = env_milliseconds(NATIVE_KILL_TIMEOUT_MS_ENV, 10_000) / 1000.0
DEFAULT_WAIT_MS: int = env_milliseconds(DEFAULT_WAIT_MS_ENV, 5_000)
