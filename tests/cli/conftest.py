# topmark:header:start
#
#   project      : DocPreview
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running DocPreview in a controlled working directory.

`run_cli_in()` changes the process working directory to the given path before
invoking the Click CLI, since the project root defaults to the current
directory. Both helpers inject a recording runner into ``ctx.obj`` so no
container runtime is ever started.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from docpreview.cli.keys import ArgKey
from docpreview.cli.main import cli
from docpreview.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from tests.conftest import RecordingRunner


def run_cli_in(
    cwd: Path,
    argv: Sequence[str] | None = None,
    *,
    runner: RecordingRunner | None = None,
) -> Result:
    """Invoke the CLI with ``cwd`` as the working directory.

    Args:
        cwd (Path): Directory to run from (the default project root).
        argv (Sequence[str] | None): CLI arguments; ``None`` or empty runs the default action.
        runner (RecordingRunner | None): Replacement for `subprocess.run`.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    previous: str = os.getcwd()
    try:
        os.chdir(cwd)
        return run_cli(argv, runner=runner)
    finally:
        os.chdir(previous)


def run_cli(
    argv: Sequence[str] | None = None,
    *,
    runner: RecordingRunner | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (Sequence[str] | None): CLI arguments.
        runner (RecordingRunner | None): Replacement for `subprocess.run`.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    obj = {ArgKey.RUNNER: runner} if runner is not None else {}
    return CliRunner().invoke(cli, list(argv or []), obj=obj)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1): docs not ready."""
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
