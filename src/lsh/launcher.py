"""Fork/exec launcher for external commands."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

import typer
from loguru import logger

from lsh.errors import describe_failure
from lsh.types import ChildStatus, Continuation

CHILD_EXEC_FAILURE = 1


class ProcessLauncher:
    """Runs one external program at a time and blocks until it is reaped."""

    def launch(self, args: Sequence[str]) -> Continuation:
        """Run ``args`` as an external program.

        The child's own exit status never affects the session, so this always
        returns ``Continuation.CONTINUE``.
        """

        self.spawn(args)
        return Continuation.CONTINUE

    def spawn(self, args: Sequence[str]) -> ChildStatus | None:
        """Fork, exec ``args[0]`` from ``PATH`` in the child and wait for it.

        Returns the reaped child's status, or ``None`` when no child could be
        created.
        """

        argv = list(args)
        if not argv:
            raise ValueError("cannot launch an empty argument vector")

        # Buffered output would otherwise be written twice, once per process.
        sys.stdout.flush()
        sys.stderr.flush()

        try:
            pid = os.fork()
        except OSError as exc:
            logger.warning("fork failed for {}: {}", argv[0], exc)
            typer.echo(f"lsh: {describe_failure(exc)}", err=True)
            return None

        if pid == 0:
            _exec_child(argv)

        logger.debug("spawned pid={} argv={}", pid, argv)
        status = _wait_for_exit(pid)
        if status.signaled:
            logger.debug("reaped pid={} signal={}", pid, status.signal)
        else:
            logger.debug("reaped pid={} exit_code={}", pid, status.exit_code)
        return status


def _exec_child(argv: list[str]) -> None:
    try:
        os.execvp(argv[0], argv)
    except (OSError, ValueError) as exc:
        typer.echo(f"lsh: {argv[0]}: {describe_failure(exc)}", err=True)
    finally:
        os._exit(CHILD_EXEC_FAILURE)


def _wait_for_exit(pid: int) -> ChildStatus:
    while True:
        try:
            _, raw = os.waitpid(pid, os.WUNTRACED)
        except KeyboardInterrupt:
            # The child shares the terminal and got the same SIGINT; keep waiting for it.
            logger.debug("interrupted while waiting for pid={}", pid)
            continue
        if os.WIFEXITED(raw) or os.WIFSIGNALED(raw):
            return ChildStatus(pid=pid, raw=raw)
        logger.debug("pid={} stopped; still waiting", pid)
