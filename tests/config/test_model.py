# topmark:header:start
#
#   project      : DocPreview
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the mutable/frozen preview configuration model."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from docpreview.config import MutablePreviewConfig, PreviewConfig
from docpreview.errors import ConfigError
from docpreview.exit_codes import ExitCode


def test_defaults_match_the_classic_preview(tmp_path: Path) -> None:
    """Built-in defaults reproduce the fixed nginx preview setup."""
    config = MutablePreviewConfig.from_defaults(tmp_path).freeze()

    assert config.doc_path == tmp_path.resolve() / "target" / "doc"
    assert config.image == "nginx:1.23.4-alpine3.17-slim"
    assert config.container_name == "doc-preview"
    assert (config.host_port, config.container_port) == (9090, 80)
    assert config.web_root == "/usr/share/nginx/html"
    assert config.runtime == "docker"
    assert config.interactive is True
    assert config.read_only is False
    assert config.url == "http://localhost:9090"


def test_frozen_config_is_immutable(tmp_path: Path) -> None:
    """Frozen snapshots reject mutation; thaw() gives an editable copy."""
    config = MutablePreviewConfig.from_defaults(tmp_path).freeze()

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.host_port = 1  # type: ignore[misc]

    m = config.thaw()
    m.host_port = 8000
    assert m.freeze().host_port == 8000
    assert config.host_port == 9090


def test_absolute_doc_dir_ignores_root(tmp_path: Path) -> None:
    """An absolute doc_dir is used as-is."""
    docs = tmp_path / "elsewhere"
    config = PreviewConfig(root=tmp_path / "root", doc_dir=str(docs))

    assert config.doc_path == docs


def test_merge_table_applies_and_records_source(tmp_path: Path) -> None:
    """Known keys override defaults and the source file is remembered."""
    m = MutablePreviewConfig.from_defaults(tmp_path)
    source = tmp_path / "docpreview.toml"

    m.merge_table({"host_port": 8080, "runtime": "podman", "read_only": True}, source=source)
    config = m.freeze()

    assert (config.host_port, config.runtime, config.read_only) == (8080, "podman", True)
    assert config.config_files == (source,)


def test_merge_table_ignores_unknown_keys(tmp_path: Path) -> None:
    """Unknown keys are skipped rather than rejected."""
    m = MutablePreviewConfig.from_defaults(tmp_path)

    m.merge_table({"colour": "blue"})

    assert not hasattr(m.freeze(), "colour")


@pytest.mark.parametrize(
    "table",
    [
        {"host_port": "9090"},
        {"host_port": True},
        {"image": 3},
        {"read_only": "yes"},
    ],
)
def test_merge_table_rejects_wrong_types(tmp_path: Path, table: dict[str, object]) -> None:
    """Values of the wrong type raise ConfigError (exit 78)."""
    m = MutablePreviewConfig.from_defaults(tmp_path)

    with pytest.raises(ConfigError) as excinfo:
        m.merge_table(table)

    assert excinfo.value.exit_code == ExitCode.CONFIG_ERROR


@pytest.mark.parametrize("port", [0, 65536, -1])
def test_freeze_rejects_out_of_range_ports(tmp_path: Path, port: int) -> None:
    """Ports outside 1..65535 are rejected at freeze time."""
    m = MutablePreviewConfig.from_defaults(tmp_path)
    m.container_port = port

    with pytest.raises(ConfigError, match="container_port"):
        m.freeze()


def test_freeze_rejects_empty_container_name(tmp_path: Path) -> None:
    """The reserved container name cannot be blank."""
    m = MutablePreviewConfig.from_defaults(tmp_path)
    m.container_name = "  "

    with pytest.raises(ConfigError, match="container_name"):
        m.freeze()


def test_overrides_skip_none(tmp_path: Path) -> None:
    """`None` means "option not given" and leaves the current value alone."""
    m = MutablePreviewConfig.from_defaults(tmp_path)

    m.apply_overrides(host_port=None, image="nginx:alpine")

    assert m.host_port == 9090
    assert m.image == "nginx:alpine"
