# topmark:header:start
#
#   file         : options.py
#   file_relpath : src/docpreview/cli/options.py
#   project      : DocPreview
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for DocPreview.

This module centralizes reusable options (verbosity, color, preview settings)
and their resolution logic, so the group and its commands can stay thin.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from docpreview.cli.errors import DocPreviewUsageError
from docpreview.cli.keys import ArgKey, CliOpt
from docpreview.config.model import MAX_PORT, MIN_PORT

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` was passed.
        quiet_count: Number of times ``-q`` was passed.

    Returns:
        ``verbose_count`` (0 is the default), or ``-quiet_count`` when quieted.

    Raises:
        DocPreviewUsageError: If both flags are used together.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise DocPreviewUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -quiet_count
    return verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        CliOpt.VERBOSE,
        ArgKey.VERBOSE,
        count=True,
        help="Increase verbosity (show runtime commands).",
    )(f)
    f = click.option(
        "-q",
        CliOpt.QUIET,
        ArgKey.QUIET,
        count=True,
        help="Suppress informational output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Honors ``--color``/``--no-color`` first, then ``FORCE_COLOR`` and
    ``NO_COLOR``, and finally enables color only when stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options."""
    f = click.option(
        CliOpt.COLOR_MODE,
        ArgKey.COLOR_MODE,
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        CliOpt.NO_COLOR_MODE,
        ArgKey.NO_COLOR_MODE,
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def preview_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the options that shape the preview configuration.

    All of them default to "not given" so config files keep precedence over
    built-in defaults.
    """
    f = click.option(
        CliOpt.ROOT,
        ArgKey.ROOT,
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        help=(
            "Project root holding the documentation directory (default: current directory). "
            "It is not searched upwards: run from a subdirectory without --root and the "
            "preview reports \"doc isn't ready\"."
        ),
    )(f)
    f = click.option(
        CliOpt.CONFIG_PATHS,
        ArgKey.CONFIG_PATHS,
        type=click.Path(dir_okay=False, path_type=Path),
        multiple=True,
        help="Read settings from this TOML file (repeatable; disables discovery).",
    )(f)
    f = click.option(
        CliOpt.NO_CONFIG,
        ArgKey.NO_CONFIG,
        is_flag=True,
        help="Ignore docpreview.toml and [tool.docpreview] in pyproject.toml.",
    )(f)
    f = click.option(
        CliOpt.PORT,
        ArgKey.HOST_PORT,
        type=click.IntRange(MIN_PORT, MAX_PORT),
        default=None,
        help="Host port to publish the preview on (default: 9090).",
    )(f)
    f = click.option(
        CliOpt.DRY_RUN,
        ArgKey.DRY_RUN,
        is_flag=True,
        help="Print the runtime commands instead of running them.",
    )(f)
    return f
