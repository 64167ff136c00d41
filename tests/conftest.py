from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest
from loguru import logger

from lsh import logging_utils
from lsh.launcher import ProcessLauncher
from lsh.types import Continuation


@pytest.fixture(autouse=True)
def _isolated_cwd(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    # `cd` mutates the process cwd; monkeypatch restores it after each test.
    monkeypatch.chdir(tmp_path)
    for name in ("LSH_PROMPT", "LSH_EXIT_ON_EOF", "LSH_LOG_LEVEL", "LSH_LOG_PROFILE"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    # CliRunner swaps sys.stderr per invocation; drop sinks bound to a stale stream.
    monkeypatch.setattr(logging_utils, "_CONFIGURED", None)
    yield
    logger.remove()


@dataclass
class FakeLauncher(ProcessLauncher):
    launched: list[tuple[str, ...]] = field(default_factory=list)

    def launch(self, args: Sequence[str]) -> Continuation:
        self.launched.append(tuple(args))
        return Continuation.CONTINUE


@pytest.fixture
def fake_launcher() -> FakeLauncher:
    return FakeLauncher()
