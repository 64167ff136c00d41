"""Commands implemented inside the interpreter."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import ClassVar

import typer
from loguru import logger

from lsh.errors import describe_failure
from lsh.types import Continuation

HELP_BANNER = (
    "Welcome to lsh",
    "Type program name and arguments and hit ENTER",
    "The following commands are built in:",
)
HELP_FOOTER = 'Use the "man" command for information about other programs'


class Builtin(ABC):
    """A command handled in-process."""

    name: ClassVar[str]

    @abstractmethod
    def run(self, args: Sequence[str], table: BuiltinTable) -> Continuation:
        """Run the command with the full argument vector."""


class ChangeDirectory(Builtin):
    name = "cd"

    def run(self, args: Sequence[str], table: BuiltinTable) -> Continuation:
        if len(args) < 2:
            typer.echo('lsh: expected argument to "cd"', err=True)
            return Continuation.CONTINUE

        path = args[1]
        try:
            os.chdir(path)
        except (OSError, ValueError) as exc:
            # ValueError: the path holds a NUL byte and never reaches the kernel.
            typer.echo(f"lsh: {describe_failure(exc)}: {path}", err=True)
            return Continuation.CONTINUE

        logger.debug("working directory changed to {}", os.getcwd())
        return Continuation.CONTINUE


class Help(Builtin):
    name = "help"

    def run(self, args: Sequence[str], table: BuiltinTable) -> Continuation:
        for line in HELP_BANNER:
            typer.echo(line)
        for name in table.names():
            typer.echo(f"\t{name}")
        typer.echo(HELP_FOOTER)
        return Continuation.CONTINUE


class Exit(Builtin):
    name = "exit"

    def run(self, args: Sequence[str], table: BuiltinTable) -> Continuation:
        return Continuation.TERMINATE


@dataclass(frozen=True)
class BuiltinTable:
    """Ordered, immutable table of builtins scanned linearly by name."""

    entries: tuple[Builtin, ...]

    def __post_init__(self) -> None:
        names = self.names()
        if len(set(names)) != len(names):
            raise ValueError(f"duplicate builtin names: {names}")

    def __iter__(self) -> Iterator[Builtin]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def names(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in self.entries)

    def lookup(self, name: str) -> Builtin | None:
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None


def default_builtins() -> BuiltinTable:
    """Build the fixed builtin table in scan order."""

    return BuiltinTable((ChangeDirectory(), Help(), Exit()))
