"""Graceful termination of a single process."""

from __future__ import annotations

import enum
import logging
import os
import signal

import psutil

from tree_killer.subprocess_runner import run_and_capture

logger = logging.getLogger(__name__)


class TerminationOutcome(enum.Enum):
    """Per-target result of a termination request. Informational only."""

    TERMINATED = "terminated"
    ALREADY_EXITED = "already-exited"
    SIGNAL_REJECTED = "signal-rejected"


def _signal_directly(pid: int) -> TerminationOutcome:
    """Fallback when no ``kill`` helper can be spawned at all."""
    try:
        os.kill(pid, signal.SIGTERM)
    except ProcessLookupError:
        return TerminationOutcome.ALREADY_EXITED
    except OSError as e:
        logger.debug("Direct SIGTERM to pid %d failed: %s", pid, e)
        return TerminationOutcome.SIGNAL_REJECTED
    return TerminationOutcome.TERMINATED


def signal_process(pid: int, grace_period: float | None = None) -> TerminationOutcome:
    """Ask ``pid`` to exit with SIGTERM via ``kill -TERM``.

    Never raises for a target that is already gone or refuses the signal.

    Raises:
        ValueError: If ``pid`` is not positive; ``kill`` treats 0 and -1 as groups.
    """
    if pid <= 0:
        msg = f"pid must be a positive integer (got {pid})"
        raise ValueError(msg)

    result = run_and_capture("kill", ["-TERM", str(pid)], grace_period=grace_period)

    if not result.spawned:
        logger.debug("No kill helper (%s), signalling pid %d directly", result.error, pid)
        outcome = _signal_directly(pid)
    elif result.ok:
        outcome = TerminationOutcome.TERMINATED
    elif not psutil.pid_exists(pid):
        outcome = TerminationOutcome.ALREADY_EXITED
    else:
        # Non-zero or timed out helper: delivery unconfirmed
        outcome = TerminationOutcome.SIGNAL_REJECTED

    logger.debug("SIGTERM pid %d: %s", pid, outcome.value)
    return outcome
