"""Line acquisition from the operator's input stream."""

from __future__ import annotations

from typing import TextIO

from loguru import logger

from lsh.errors import FatalAllocationError
from lsh.types import InputLine

READLINE_BUFSIZE = 1024
LINE_TERMINATOR = "\n"


class LineReader:
    """Reads one line at a time, growing its buffer by a fixed increment."""

    def __init__(self, stream: TextIO, *, bufsize: int = READLINE_BUFSIZE) -> None:
        if bufsize <= 0:
            raise ValueError("bufsize must be positive")
        self._stream = stream
        self._bufsize = bufsize

    def read_line(self) -> InputLine:
        """Read up to the next newline or end-of-input.

        The newline is not part of the returned text. ``eof`` is set when the
        stream ran out before a newline was seen, so an empty line at
        end-of-input can be told apart from a blank line.
        """

        capacity = self._bufsize
        try:
            buffer = _blank(capacity)
        except MemoryError as exc:
            raise FatalAllocationError("Error allocating buffer space") from exc
        position = 0

        while True:
            char = self._stream.read(1)
            if not char or char == LINE_TERMINATOR:
                return InputLine(text="".join(buffer[:position]), eof=not char, capacity=capacity)

            buffer[position] = char
            position += 1

            if position >= capacity:
                try:
                    buffer.extend(_blank(self._bufsize))
                except MemoryError as exc:
                    raise FatalAllocationError("Error reallocating buffer space") from exc
                capacity += self._bufsize
                logger.debug("input buffer grown to {} characters", capacity)


def _blank(size: int) -> list[str]:
    return [""] * size
