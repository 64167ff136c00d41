"""Command-line entry point for lsh."""

from __future__ import annotations

import sys

import typer

from lsh import __version__
from lsh.builtins import default_builtins
from lsh.config import LogProfile, Settings, get_settings
from lsh.dispatcher import CommandDispatcher
from lsh.errors import ConfigurationError, FatalError
from lsh.launcher import ProcessLauncher
from lsh.logging_utils import configure_logging
from lsh.loop import CommandLoop
from lsh.reader import LineReader

EXIT_INTERRUPTED = 130

app = typer.Typer(
    name="lsh",
    help="A minimal interactive command interpreter.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"lsh {__version__}")
        raise typer.Exit()


def build_loop(settings: Settings) -> CommandLoop:
    """Wire reader, builtins, launcher and dispatcher into a command loop."""

    dispatcher = CommandDispatcher(default_builtins(), ProcessLauncher())
    return CommandLoop(
        LineReader(sys.stdin),
        dispatcher,
        prompt=settings.prompt,
        exit_on_eof=settings.exit_on_eof,
    )


@app.command()
def main(
    prompt: str | None = typer.Option(None, "--prompt", "-p", help="Prompt printed before each read"),
    exit_on_eof: bool | None = typer.Option(
        None,
        "--exit-on-eof/--keep-on-eof",
        help="End the session on end-of-input, or treat it as a blank line",
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Log level (DEBUG, INFO, WARNING, ...)"),
    log_profile: str | None = typer.Option(None, "--log-profile", help="Log sink profile: default or rich"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """Read commands from stdin and run them until `exit`."""

    try:
        settings = get_settings(
            prompt=prompt,
            exit_on_eof=exit_on_eof,
            log_level=log_level,
            log_profile=log_profile,
        )
        _configure_logging(settings.log_level, settings.log_profile)
    except ConfigurationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        status = build_loop(settings).run()
    except FatalError as exc:
        typer.echo(f"lsh: {exc}", err=True)
        raise typer.Exit(1) from exc
    except KeyboardInterrupt:
        typer.echo()
        raise typer.Exit(EXIT_INTERRUPTED) from None
    raise typer.Exit(status)


def _configure_logging(level: str, profile: LogProfile) -> None:
    try:
        configure_logging(level, profile=profile)
    except ValueError as exc:
        raise ConfigurationError(f"invalid log level {level!r}: {exc}") from exc
