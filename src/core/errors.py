"""Errors raised by the core layer."""

from __future__ import annotations


class ArgumentError(ValueError):
    """Invalid invocation input (missing TEXT, bad environment value).

    The CLI turns it into a usage error; it is never retried.
    """
