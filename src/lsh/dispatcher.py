"""Builtin-vs-external command dispatch."""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from lsh.builtins import BuiltinTable
from lsh.launcher import ProcessLauncher
from lsh.types import Continuation


class CommandDispatcher:
    """Routes an argument vector to a builtin or to the process launcher."""

    def __init__(self, builtins: BuiltinTable, launcher: ProcessLauncher) -> None:
        self._builtins = builtins
        self._launcher = launcher

    def dispatch(self, args: Sequence[str]) -> Continuation:
        if not args:
            return Continuation.CONTINUE

        builtin = self._builtins.lookup(args[0])
        if builtin is not None:
            logger.debug("builtin {} argv={}", builtin.name, list(args))
            return builtin.run(args, self._builtins)

        return self._launcher.launch(args)
