"""lsh - a minimal interactive command interpreter."""

from .builtins import Builtin, BuiltinTable, default_builtins
from .dispatcher import CommandDispatcher
from .launcher import ProcessLauncher
from .loop import CommandLoop
from .reader import LineReader
from .tokenizer import split_line
from .types import Continuation

__version__ = "0.1.0"

__all__ = [
    "Builtin",
    "BuiltinTable",
    "CommandDispatcher",
    "CommandLoop",
    "Continuation",
    "LineReader",
    "ProcessLauncher",
    "default_builtins",
    "split_line",
]
