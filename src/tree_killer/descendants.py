"""Descendant discovery by repeated single-level ``pgrep -P`` lookups."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from tree_killer.subprocess_runner import run_and_capture

logger = logging.getLogger(__name__)

ChildQuery = Callable[[int], list[int]]


def parse_process_ids(text: str) -> Iterator[int]:
    """Yield the process ids in ``text``, one per line.

    Blank lines, non-numeric lines and non-positive numbers are skipped.
    """
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        try:
            pid = int(line)
        except ValueError:
            continue
        if pid > 0:
            yield pid


def query_children(parent_id: int, grace_period: float | None = None) -> list[int]:
    """List the immediate children of ``parent_id``.

    A missing, failing or hung ``pgrep`` means no children; ``pgrep`` also
    exits with 1 when nothing matched. Non-positive ids have no children.
    """
    if parent_id <= 0:
        return []
    result = run_and_capture("pgrep", ["-P", str(parent_id)], grace_period=grace_period)
    if not result.ok:
        if not result.spawned:
            logger.debug("Child query for pid %d could not run: %s", parent_id, result.error)
        elif result.timed_out:
            logger.debug("Child query for pid %d timed out", parent_id)
        return []
    return list(parse_process_ids(result.stdout))


def collect_descendants(
    parent_id: int,
    accumulator: set[int],
    query: ChildQuery = query_children,
) -> set[int]:
    """
    Add every live descendant of ``parent_id`` to ``accumulator``.

    Depth-first: each newly seen child is recursed into before its siblings.
    Ids already in ``accumulator`` are never queried again, so a pid reported
    under two parents, or recycled into a cycle, terminates the walk.

    Returns:
        The same ``accumulator``, for convenience.
    """
    for child_id in query(parent_id):
        if child_id in accumulator:
            continue
        accumulator.add(child_id)
        collect_descendants(child_id, accumulator, query)
    return accumulator
