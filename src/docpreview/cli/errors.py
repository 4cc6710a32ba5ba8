# topmark:header:start
#
#   project      : DocPreview
#   file         : errors.py
#   file_relpath : src/docpreview/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click exceptions for the DocPreview CLI.

Domain errors from [`docpreview.errors`][] are translated into these with
[`to_cli_error`][docpreview.cli.errors.to_cli_error] so they print through the
project console and exit with the matching [`ExitCode`][docpreview.exit_codes.ExitCode].
"""

from __future__ import annotations

from typing import IO, Any

import click

from docpreview.cli.console_helpers import get_console_safely
from docpreview.errors import ConfigError, DocPreviewError, RuntimeNotFoundError
from docpreview.exit_codes import ExitCode


class DocPreviewCliError(click.ClickException):
    """Base class for all DocPreview CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (color is applied in `show()`)."""
        return str(self.message)

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error on the project console's error stream."""
        console = get_console_safely()
        console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))


class DocPreviewUsageError(DocPreviewCliError):
    """Error for command-line invocation errors (invalid flag combinations)."""

    exit_code = ExitCode.USAGE_ERROR


class DocPreviewConfigError(DocPreviewCliError):
    """Error for configuration errors (malformed TOML, bad values)."""

    exit_code = ExitCode.CONFIG_ERROR


class DocPreviewRuntimeNotFoundError(DocPreviewCliError):
    """Error when the container runtime executable is unavailable."""

    exit_code = ExitCode.RUNTIME_NOT_FOUND


def to_cli_error(exc: DocPreviewError) -> DocPreviewCliError:
    """Map a domain error to its CLI counterpart."""
    if isinstance(exc, ConfigError):
        return DocPreviewConfigError(str(exc))
    if isinstance(exc, RuntimeNotFoundError):
        return DocPreviewRuntimeNotFoundError(str(exc))
    err = DocPreviewCliError(str(exc))
    err.exit_code = exc.exit_code
    return err
