"""Typer entrypoint for textecho.

Flow: parse argv -> validate -> join -> write to stdout. Usage errors are
reported by Typer on stderr (with the ``Usage`` line) and exit with status 2.
"""

from __future__ import annotations

import logging
from typing import Annotated

import typer

from core import __version__
from core.config import load_settings
from core.errors import ArgumentError
from core.logging_setup import configure_logging
from core.services.echo import build_invocation, render

PROG_NAME = "textecho"

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Join TEXT with single spaces and print it.",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROG_NAME} {__version__}")
        raise typer.Exit()


@app.command()
def echo(
    ctx: typer.Context,
    text: Annotated[
        list[str],
        typer.Argument(metavar="TEXT", help="Input text", show_default=False),
    ],
    omit_newline: Annotated[
        bool,
        typer.Option("-n", "--omit-newline", help="Do not print newline"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "-V",
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Print version and exit.",
        ),
    ] = False,
) -> None:
    """Print TEXT joined by single spaces, followed by a newline unless -n is given."""

    try:
        settings = load_settings()
        configure_logging(settings.log_level)
        invocation = build_invocation(text, omit_newline=omit_newline)
    except ArgumentError as exc:
        raise typer.BadParameter(str(exc), ctx=ctx) from exc

    logger.debug("Parsed %r", invocation)
    # color=True: click strips ANSI escapes on non-TTY stdout otherwise.
    typer.echo(render(invocation), nl=False, color=True)


def run() -> None:
    """Entry point for the console script and `python -m main`."""

    app(prog_name=PROG_NAME)
