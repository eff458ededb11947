"""Short-lived helper process runner.

This module contains the primitive used to run the small diagnostic tools
(``pgrep``, ``kill``, ``taskkill``) that drive a tree kill. Each helper gets a
short, fixed grace period; a helper that does not finish in time is presumed
hung and killed.
"""

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass, field

from tree_killer import config

logger = logging.getLogger(__name__)


@dataclass
class HelperResult:
    """Outcome of a single helper invocation."""

    command: list[str]
    returncode: int | None  # None when the helper could not be spawned
    stdout: str = ""
    timed_out: bool = False
    error: str | None = field(default=None, repr=False)

    @property
    def spawned(self) -> bool:
        return self.returncode is not None

    @property
    def ok(self) -> bool:
        """True only for a helper that ran to completion and exited with 0.

        The exit status of a timed out helper is whatever the forced kill
        produced and is never treated as success.
        """
        return self.spawned and not self.timed_out and self.returncode == 0


def run_and_capture(
    command: str,
    arguments: Sequence[str],
    grace_period: float | None = None,
) -> HelperResult:
    """
    Run a helper without a shell and capture its stdout.

    Args:
        command: Executable to run, resolved through PATH.
        arguments: Discrete arguments, passed through untouched.
        grace_period: Seconds to wait for the helper before killing it.
            None uses config.HELPER_GRACE_PERIOD.

    Returns:
        HelperResult with the real exit status and stdout when the helper
        finished in time. When it did not, the helper has been killed and
        reaped, ``timed_out`` is set and stdout is empty.
    """
    argv = [command, *arguments]
    wait_for = config.HELPER_GRACE_PERIOD if grace_period is None else grace_period

    try:
        proc = subprocess.Popen(  # noqa: S603
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as e:
        logger.debug("Helper %s could not be started: %s", command, e)
        return HelperResult(command=argv, returncode=None, error=str(e))

    # Popen.__exit__ closes the pipe and reaps the helper on every path
    with proc:
        try:
            stdout, _ = proc.communicate(timeout=wait_for)
        except subprocess.TimeoutExpired:
            logger.debug(
                "Helper %s (pid %s) exceeded %.3fs grace period, killing",
                subprocess.list2cmdline(argv),
                proc.pid,
                wait_for,
            )
            proc.kill()
            proc.wait()
            return HelperResult(command=argv, returncode=proc.returncode, timed_out=True)

    return HelperResult(command=argv, returncode=proc.returncode, stdout=stdout or "")
