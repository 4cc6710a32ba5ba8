# topmark:header:start
#
#   project      : DocPreview
#   file         : test_config_command.py
#   file_relpath : tests/cli/test_config_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI `config` command: effective configuration rendered as TOML."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import tomlkit

from tests.cli.conftest import assert_CONFIG_ERROR, assert_SUCCESS, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

pytestmark = pytest.mark.cli


def test_config_shows_defaults(bare_project: Path) -> None:
    """Without config files the defaults are printed."""
    result: Result = run_cli_in(bare_project, ["config"])

    assert_SUCCESS(result)
    doc = tomlkit.parse(result.stdout).unwrap()
    assert doc["image"] == "nginx:1.23.4-alpine3.17-slim"
    assert doc["host_port"] == 9090
    assert doc["doc_dir"] == "target/doc"


def test_config_merges_file_and_cli(bare_project: Path) -> None:
    """Config file values and `--port` both show up."""
    (bare_project / "docpreview.toml").write_text('image = "nginx:alpine"\n', encoding="utf-8")

    result: Result = run_cli_in(bare_project, ["--port", "8000", "config"])

    assert_SUCCESS(result)
    doc = tomlkit.parse(result.stdout).unwrap()
    assert (doc["image"], doc["host_port"]) == ("nginx:alpine", 8000)


def test_config_pyproject_layout(bare_project: Path) -> None:
    """`--pyproject` nests the output under [tool.docpreview]."""
    result: Result = run_cli_in(bare_project, ["config", "--pyproject"])

    assert_SUCCESS(result)
    assert "[tool.docpreview]" in result.stdout


def test_config_reports_invalid_settings(bare_project: Path) -> None:
    """Out-of-range ports in config files exit with CONFIG_ERROR."""
    (bare_project / "docpreview.toml").write_text("host_port = 0\n", encoding="utf-8")

    result: Result = run_cli_in(bare_project, ["config"])

    assert_CONFIG_ERROR(result)
