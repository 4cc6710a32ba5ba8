# topmark:header:start
#
#   project      : DocPreview
#   file         : test_verbosity_flags.py
#   file_relpath : tests/cli/test_verbosity_flags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: verbosity, quietness and color flags."""

from __future__ import annotations

from typing import TYPE_CHECKING

from docpreview.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, run_cli

if TYPE_CHECKING:
    from click.testing import Result


def test_verbose_and_quiet_flags_parse() -> None:
    """Verbosity and quietness flags are accepted on their own."""
    for args in (["-v", "version"], ["-vv", "version"], ["-q", "version"], ["-qq", "version"]):
        result: Result = run_cli(args)

        assert_SUCCESS(result)


def test_verbose_and_quiet_are_mutually_exclusive() -> None:
    """Combining -v and -q is a usage error (64)."""
    result: Result = run_cli(["-v", "-q", "version"])

    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "mutually exclusive" in result.output


def test_color_flags_parse() -> None:
    """`--color` choices and `--no-color` are accepted."""
    for args in (["--color", "always", "version"], ["--no-color", "version"]):
        assert_SUCCESS(run_cli(args))


def test_invalid_color_choice_is_rejected() -> None:
    """Unknown `--color` values are rejected by Click."""
    result: Result = run_cli(["--color", "sometimes", "version"])

    assert result.exit_code != ExitCode.SUCCESS
