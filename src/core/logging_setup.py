"""Diagnostic logging (stdlib logging + Rich).

Logs always go to stderr so they never mix with the echoed text on stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAMES = ("cli", "core")
_HANDLER_NAME = "textecho-rich"


def configure_logging(level: str | int = "WARNING") -> None:
    """Attach a single RichHandler to the application loggers.

    Safe to call once per invocation; a previous handler is replaced.
    """

    handler = RichHandler(console=Console(stderr=True), show_path=False, markup=False)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))

    for name in _LOGGER_NAMES:
        log = logging.getLogger(name)
        for existing in list(log.handlers):
            if existing.get_name() == _HANDLER_NAME:
                log.removeHandler(existing)
        log.addHandler(handler)
        log.setLevel(level)
        log.propagate = False
