# topmark:header:start
#
#   project      : DocPreview
#   file         : console_helpers.py
#   file_relpath : src/docpreview/cli/console_helpers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Obtain a program-output console with or without an active Click context."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docpreview.cli.console_std import StdConsole
from docpreview.cli.keys import ArgKey

if TYPE_CHECKING:
    from docpreview.cli.console_api import ConsoleLike


def get_console_safely() -> ConsoleLike:
    """Return the console stored on the active Click context, if any.

    Falls back to a [`StdConsole`][docpreview.cli.console_std.StdConsole] when
    no context is active (e.g. when errors are shown outside a command).
    """
    ctx = click.get_current_context(silent=True)
    if ctx is not None and isinstance(ctx.obj, dict) and ArgKey.CONSOLE in ctx.obj:
        console: ConsoleLike = ctx.obj[ArgKey.CONSOLE]
        return console
    return StdConsole()
