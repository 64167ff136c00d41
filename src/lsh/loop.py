"""Interactive read-tokenize-dispatch loop."""

from __future__ import annotations

import typer
from loguru import logger

from lsh.config import DEFAULT_PROMPT
from lsh.dispatcher import CommandDispatcher
from lsh.reader import LineReader
from lsh.tokenizer import split_line
from lsh.types import Continuation

EXIT_SUCCESS = 0


class CommandLoop:
    """Prompt, read, tokenize and dispatch until a command asks to stop."""

    def __init__(
        self,
        reader: LineReader,
        dispatcher: CommandDispatcher,
        *,
        prompt: str = DEFAULT_PROMPT,
        exit_on_eof: bool = True,
    ) -> None:
        self._reader = reader
        self._dispatcher = dispatcher
        self._prompt = prompt
        self._exit_on_eof = exit_on_eof

    def run(self) -> int:
        signal = Continuation.CONTINUE
        while signal is Continuation.CONTINUE:
            signal = self.step()
        return EXIT_SUCCESS

    def step(self) -> Continuation:
        """Run one iteration and return the signal that decides the next."""

        typer.echo(self._prompt, nl=False)
        line = self._reader.read_line()

        if line.eof and not line.text and self._exit_on_eof:
            typer.echo()
            logger.debug("end of input")
            return Continuation.TERMINATE

        args = split_line(line.text)
        signal = self._dispatcher.dispatch(args)
        if line.eof and self._exit_on_eof:
            # Unterminated last line: it ran, but there is nothing left to read.
            return Continuation.TERMINATE
        return signal
