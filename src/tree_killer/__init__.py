"""Kill a process together with every process it transitively launched."""

from __future__ import annotations

__version__ = "1.0.0"

from tree_killer.descendants import collect_descendants, parse_process_ids, query_children
from tree_killer.process_utils import get_process_tree_info, kill_tree, wait_for_exit
from tree_killer.signaler import TerminationOutcome, signal_process
from tree_killer.strategy import DEFAULT_STRATEGY, KillStrategy, detect_strategy
from tree_killer.subprocess_runner import HelperResult, run_and_capture

__all__ = [
    "DEFAULT_STRATEGY",
    "HelperResult",
    "KillStrategy",
    "TerminationOutcome",
    "collect_descendants",
    "detect_strategy",
    "get_process_tree_info",
    "kill_tree",
    "parse_process_ids",
    "query_children",
    "run_and_capture",
    "signal_process",
    "wait_for_exit",
]
