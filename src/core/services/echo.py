"""Echo line construction.

The CLI delegates everything except the final write to these helpers, which
keeps the formatting rules testable without a terminal.
"""

from __future__ import annotations

from typing import Sequence

from pydantic import ValidationError

from core.domain.models import InvocationArgs
from core.errors import ArgumentError

SEPARATOR = " "
NEWLINE = "\n"


def line_ending(omit_newline: bool) -> str:
    return "" if omit_newline else NEWLINE


def join_text(tokens: Sequence[str]) -> str:
    """Join *tokens* with a single space, preserving order and duplicates."""

    if not tokens:
        raise ArgumentError("TEXT requires at least one value")
    return SEPARATOR.join(tokens)


def build_invocation(text: Sequence[str], *, omit_newline: bool = False) -> InvocationArgs:
    """Validate raw CLI values into an :class:`InvocationArgs`.

    Raises
    ------
    ArgumentError
        If *text* is empty.
    """

    try:
        return InvocationArgs(text=list(text), omit_newline=omit_newline)
    except ValidationError as exc:
        raise ArgumentError("TEXT requires at least one value") from exc


def render(args: InvocationArgs) -> str:
    """Exact text to write to stdout for *args*."""

    return join_text(args.text) + line_ending(args.omit_newline)
