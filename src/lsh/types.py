"""Shared core types."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

ArgumentVector = tuple[str, ...]


class Continuation(str, Enum):
    """Signal returned by every dispatched command."""

    CONTINUE = "continue"
    TERMINATE = "terminate"


@dataclass(frozen=True)
class InputLine:
    """One line read from the operator, terminator excluded."""

    text: str
    eof: bool = False
    capacity: int = 0

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class ChildStatus:
    """Final status of a reaped child process."""

    pid: int
    raw: int

    @property
    def exited(self) -> bool:
        return os.WIFEXITED(self.raw)

    @property
    def signaled(self) -> bool:
        return os.WIFSIGNALED(self.raw)

    @property
    def exit_code(self) -> int | None:
        return os.WEXITSTATUS(self.raw) if self.exited else None

    @property
    def signal(self) -> int | None:
        return os.WTERMSIG(self.raw) if self.signaled else None
