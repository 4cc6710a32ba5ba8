# topmark:header:start
#
#   project      : DocPreview
#   file         : errors.py
#   file_relpath : src/docpreview/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Domain exceptions raised by the launcher, the runtime adapter and config loading.

These are framework-agnostic; the CLI layer translates them into
[`docpreview.cli.errors`][] exceptions with matching exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docpreview.constants import DOCS_NOT_READY_MESSAGE
from docpreview.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path


class DocPreviewError(Exception):
    """Base class for all DocPreview errors."""

    exit_code: ExitCode = ExitCode.FAILURE


class DocsNotReadyError(DocPreviewError):
    """The documentation artifact directory does not exist (yet)."""

    exit_code = ExitCode.FAILURE

    def __init__(self, path: Path) -> None:
        super().__init__(DOCS_NOT_READY_MESSAGE)
        self.path = path


class RuntimeNotFoundError(DocPreviewError):
    """The container runtime executable could not be started."""

    exit_code = ExitCode.RUNTIME_NOT_FOUND

    def __init__(self, executable: str) -> None:
        super().__init__(
            f"Container runtime '{executable}' not found; is it installed and on PATH?"
        )
        self.executable = executable


class ConfigError(DocPreviewError):
    """Invalid or malformed configuration."""

    exit_code = ExitCode.CONFIG_ERROR

    def __init__(self, message: str, *, source: Path | None = None) -> None:
        super().__init__(f"{source}: {message}" if source is not None else message)
        self.source = source
