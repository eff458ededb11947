"""Command line entry point: ``tree-kill PID [PID ...]``."""

from __future__ import annotations

import argparse
import logging
import sys

from tree_killer import config
from tree_killer.process_utils import get_process_tree_info, kill_tree


def _positive_pid(value: str) -> int:
    pid = int(value)
    if pid <= 0:
        msg = f"{value!r} is not a positive process id"
        raise argparse.ArgumentTypeError(msg)
    return pid


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tree-kill",
        description="Terminate processes together with all of their descendants.",
    )
    parser.add_argument("pids", metavar="PID", type=_positive_pid, nargs="*", help="root process id(s)")
    parser.add_argument(
        "-t",
        "--timeout",
        type=int,
        default=config.DEFAULT_WAIT_MS,
        help="milliseconds to wait for each root to exit (default: %(default)s)",
    )
    parser.add_argument("--dry-run", action="store_true", help="show each tree without killing it")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every helper and signal")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.pids:
        parser.print_usage()
        return 0

    for pid in args.pids:
        if args.dry_run:
            print(get_process_tree_info(pid))
        else:
            kill_tree(pid, args.timeout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
