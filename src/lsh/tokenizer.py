"""Whitespace tokenizer producing argument vectors."""

from __future__ import annotations

import re

from loguru import logger

from lsh.errors import FatalAllocationError
from lsh.types import ArgumentVector

TOKEN_BUFSIZE = 64
TOKEN_DELIMITERS = " \t\r\n\a"

_TOKEN_RE = re.compile(f"[^{re.escape(TOKEN_DELIMITERS)}]+")


def split_line(line: str, *, bufsize: int = TOKEN_BUFSIZE) -> ArgumentVector:
    """Split a line on runs of whitespace.

    No quoting or escaping is recognised: a token is exactly a maximal run of
    characters outside ``TOKEN_DELIMITERS``, so empty tokens never appear.
    """

    capacity = bufsize
    try:
        tokens = _blank(capacity)
    except MemoryError as exc:
        raise FatalAllocationError("Allocation error") from exc
    position = 0

    for match in _TOKEN_RE.finditer(line):
        tokens[position] = match.group()
        position += 1
        if position >= capacity:
            try:
                tokens.extend(_blank(bufsize))
            except MemoryError as exc:
                raise FatalAllocationError("Allocation error") from exc
            capacity += bufsize
            logger.debug("token array grown to {} slots", capacity)

    return tuple(tokens[:position])


def _blank(size: int) -> list[str]:
    return [""] * size
