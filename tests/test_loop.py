import io
from collections.abc import Sequence

import pytest

from lsh.builtins import default_builtins
from lsh.dispatcher import CommandDispatcher
from lsh.loop import CommandLoop
from lsh.reader import LineReader
from lsh.types import Continuation


class RecordingDispatcher(CommandDispatcher):
    def __init__(self, launcher) -> None:
        super().__init__(default_builtins(), launcher)
        self.seen: list[tuple[str, ...]] = []

    def dispatch(self, args: Sequence[str]) -> Continuation:
        self.seen.append(tuple(args))
        return super().dispatch(args)


class ScriptedStream:
    """Text stream that reports end-of-input once per empty chunk."""

    def __init__(self, *chunks: str) -> None:
        self._chunks = list(chunks)
        self._current = ""

    def read(self, size: int = -1) -> str:
        while not self._current:
            if not self._chunks:
                return ""
            chunk = self._chunks.pop(0)
            if chunk == "":
                return ""
            self._current = chunk
        char, self._current = self._current[:1], self._current[1:]
        return char


def _loop(stream, launcher, **kwargs) -> tuple[CommandLoop, RecordingDispatcher]:
    dispatcher = RecordingDispatcher(launcher)
    return CommandLoop(LineReader(stream), dispatcher, **kwargs), dispatcher


def test_runs_until_exit(fake_launcher, capsys: pytest.CaptureFixture[str]) -> None:
    loop, dispatcher = _loop(io.StringIO("ls -la\n\nexit\nnever\n"), fake_launcher)

    assert loop.run() == 0
    assert dispatcher.seen == [("ls", "-la"), (), ("exit",)]
    assert fake_launcher.launched == [("ls", "-la")]
    assert capsys.readouterr().out == "> > > "


def test_custom_prompt(fake_launcher, capsys: pytest.CaptureFixture[str]) -> None:
    loop, _ = _loop(io.StringIO("exit\n"), fake_launcher, prompt="$ ")
    loop.run()
    assert capsys.readouterr().out == "$ "


def test_help_then_exit(fake_launcher, capsys: pytest.CaptureFixture[str]) -> None:
    loop, _ = _loop(io.StringIO("help\nexit\n"), fake_launcher)
    assert loop.run() == 0
    out = capsys.readouterr().out
    assert out.index("\tcd") < out.index("\thelp") < out.index("\texit")


def test_eof_terminates_by_default(fake_launcher, capsys: pytest.CaptureFixture[str]) -> None:
    loop, dispatcher = _loop(io.StringIO(""), fake_launcher)

    assert loop.run() == 0
    assert dispatcher.seen == []
    assert capsys.readouterr().out == "> \n"


def test_unterminated_last_line_runs_then_stops(fake_launcher) -> None:
    loop, dispatcher = _loop(io.StringIO("echo hi"), fake_launcher)

    assert loop.run() == 0
    assert fake_launcher.launched == [("echo", "hi")]
    assert dispatcher.seen == [("echo", "hi")]


def test_eof_without_exit_is_a_blank_line(fake_launcher) -> None:
    loop, dispatcher = _loop(ScriptedStream("", "\n", "", "exit\n"), fake_launcher, exit_on_eof=False)

    assert loop.run() == 0
    # EOF and a blank line reach the dispatcher identically.
    assert dispatcher.seen == [(), (), (), ("exit",)]
    assert fake_launcher.launched == []


def test_step_returns_each_signal(fake_launcher) -> None:
    loop, _ = _loop(io.StringIO("cd\nexit\n"), fake_launcher)
    assert loop.step() is Continuation.CONTINUE
    assert loop.step() is Continuation.TERMINATE
