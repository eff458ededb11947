#!/usr/bin/env python3
"""Process utilities for killing process trees."""

from __future__ import annotations

import contextlib
import functools
import logging
import subprocess
import warnings

import psutil

from tree_killer import config
from tree_killer.descendants import collect_descendants, query_children
from tree_killer.signaler import signal_process
from tree_killer.strategy import DEFAULT_STRATEGY, KillStrategy
from tree_killer.subprocess_runner import run_and_capture

logger = logging.getLogger(__name__)

ProcessLike = int | subprocess.Popen | psutil.Process

# taskkill exit status when the target pid does not exist
TASKKILL_NOT_FOUND = 128


def _pid_of(process: ProcessLike) -> int:
    pid = process if isinstance(process, int) else process.pid
    # 0 and negative ids address process groups or every process, never one tree
    if pid <= 0:
        msg = f"pid must be a positive integer (got {pid})"
        raise ValueError(msg)
    return pid


def _root_already_exited(process: ProcessLike) -> bool:
    """True when the handle itself proves the root is gone.

    A reaped ``Popen`` pid may already belong to an unrelated process.
    """
    if isinstance(process, subprocess.Popen):
        return process.poll() is not None
    if isinstance(process, psutil.Process):
        return not process.is_running()
    return False


def get_process_tree_info(pid: int) -> str:
    """Get information about a process and its descendants."""
    try:
        process = psutil.Process(pid)
        info = [f"Process {pid} ({process.name()})", f"Status: {process.status()}"]

        children = process.children(recursive=True)
        if children:
            info.append("\nChild processes:")
            for child in children:
                with contextlib.suppress(psutil.NoSuchProcess, psutil.AccessDenied):
                    info.append(f"  Child {child.pid} ({child.name()}) status={child.status()}")

        return "\n".join(info)
    except psutil.Error:
        return f"Could not get process info for PID {pid}"


def wait_for_exit(process: ProcessLike, timeout: float) -> bool:
    """Wait up to ``timeout`` seconds for ``process`` to exit.

    A ``subprocess.Popen`` is reaped by this call. Returns False if the
    process was still alive at the deadline.
    """
    try:
        if isinstance(process, subprocess.Popen):
            process.wait(timeout=timeout)
        else:
            target = process if isinstance(process, psutil.Process) else psutil.Process(process)
            target.wait(timeout=timeout)
    except (subprocess.TimeoutExpired, psutil.TimeoutExpired):
        return False
    except psutil.NoSuchProcess:
        pass
    return True


def _native_tree_kill(pid: int) -> None:
    result = run_and_capture("taskkill", ["/T", "/F", "/PID", str(pid)], grace_period=config.NATIVE_KILL_TIMEOUT)
    if result.ok or result.returncode == TASKKILL_NOT_FOUND:
        return
    # Outcome of the native call is opaque beyond "gone or not"
    logger.debug("Native tree kill of pid %d was not confirmed: %s", pid, result)


def _enumerate_and_signal(pid: int, grace_period: float | None) -> None:
    descendants: set[int] = set()
    query = functools.partial(query_children, grace_period=grace_period)
    try:
        collect_descendants(pid, descendants, query)
    except (OSError, subprocess.SubprocessError, RecursionError) as e:
        # Keep whatever was found so far; the root is still signalled below
        warnings.warn(f"Error enumerating process tree of {pid}: {e}", UserWarning, stacklevel=3)
    descendants.discard(pid)

    logger.debug("Signalling %d descendant(s) of pid %d", len(descendants), pid)
    for child_id in descendants:
        signal_process(child_id, grace_period=grace_period)

    signal_process(pid, grace_period=grace_period)


def kill_tree(
    process: ProcessLike,
    timeout_ms: int,
    *,
    strategy: KillStrategy | None = None,
    grace_period: float | None = None,
) -> None:
    """
    Kill a process and all of its descendants, then wait for it to exit.

    All discovered descendants are signalled before the root, and the root is
    signalled before the wait begins. A process that is already gone at any
    stage is not an error. If the root is still alive after ``timeout_ms`` the
    call returns normally.

    Args:
        process: Root process as a pid, ``subprocess.Popen`` or ``psutil.Process``.
        timeout_ms: Ceiling in milliseconds for the final wait on the root.
        strategy: Override the strategy detected at import time.
        grace_period: Override the per-helper grace period, in seconds.

    Raises:
        ValueError: If the root pid is not a positive integer.
    """
    pid = _pid_of(process)
    if _root_already_exited(process):
        logger.debug("Pid %d already exited, nothing to kill", pid)
        return
    strategy = DEFAULT_STRATEGY if strategy is None else strategy

    if strategy is KillStrategy.NATIVE_TREE_KILL:
        _native_tree_kill(pid)
    else:
        _enumerate_and_signal(pid, grace_period)

    # The caller already considers the subject dead; this only gives it a
    # chance to flush and exit.
    if not wait_for_exit(process, max(timeout_ms, 0) / 1000.0):
        logger.debug("Pid %d still alive %d ms after kill_tree", pid, timeout_ms)
