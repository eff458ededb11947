"""Selection between the native tree kill and enumerate-and-signal."""

from __future__ import annotations

import enum
import sys


class KillStrategy(enum.Enum):
    NATIVE_TREE_KILL = "native"
    ENUMERATE_AND_SIGNAL = "enumerate"


def detect_strategy(platform: str | None = None) -> KillStrategy:
    """Windows ships ``taskkill /T``; everywhere else descendants are enumerated."""
    platform = sys.platform if platform is None else platform
    if platform == "win32":
        return KillStrategy.NATIVE_TREE_KILL
    return KillStrategy.ENUMERATE_AND_SIGNAL


# Capability check happens once, not per kill
DEFAULT_STRATEGY: KillStrategy = detect_strategy()
