# topmark:header:start
#
#   project      : DocPreview
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the DocPreview test suite.

Provides a recording stand-in for `subprocess.run` so launcher and CLI tests
can assert on the runtime commands without a container runtime installed, and
a few fixtures for project layouts with and without generated documentation.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import pytest

from docpreview.config import MutablePreviewConfig
from docpreview.config import logging as dp_logging

if TYPE_CHECKING:
    from pathlib import Path

    from docpreview.config import PreviewConfig


@dataclass
class RecordingRunner:
    """Replacement for `subprocess.run` that records argv and fakes results.

    Attributes:
        rm_code (int): Exit status reported for ``rm`` invocations.
        run_code (int): Exit status reported for ``run`` invocations.
        missing (bool): Raise `FileNotFoundError` as if the executable were absent.
        interrupt (bool): Raise `KeyboardInterrupt` from ``run`` invocations.
        calls (list[list[str]]): Recorded argument vectors, in call order.
        kwargs (list[dict[str, Any]]): Keyword arguments of each call.
    """

    rm_code: int = 0
    run_code: int = 0
    missing: bool = False
    interrupt: bool = False
    calls: list[list[str]] = field(default_factory=list)
    kwargs: list[dict[str, Any]] = field(default_factory=list)

    def __call__(self, argv: list[str], **kwargs: Any) -> subprocess.CompletedProcess[Any]:
        if self.missing:
            raise FileNotFoundError(2, "No such file or directory", argv[0])
        self.calls.append(list(argv))
        self.kwargs.append(kwargs)
        if argv[1] == "rm":
            stderr = "" if self.rm_code == 0 else f"Error: No such container: {argv[-1]}"
            return subprocess.CompletedProcess(argv, self.rm_code, stdout="", stderr=stderr)
        if self.interrupt:
            raise KeyboardInterrupt
        return subprocess.CompletedProcess(argv, self.run_code)

    @property
    def subcommands(self) -> list[str]:
        """Runtime subcommand of each recorded call (``rm``, ``run``)."""
        return [argv[1] for argv in self.calls]


@pytest.fixture(autouse=True)
def silence_docpreview_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture used to drop the variable.
    """
    monkeypatch.delenv("DOCPREVIEW_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level so failures come with full diagnostics."""
    dp_logging.setup_logging(level=dp_logging.TRACE_LEVEL)


@pytest.fixture
def recording_runner() -> RecordingRunner:
    """Return a fresh [`RecordingRunner`][tests.conftest.RecordingRunner]."""
    return RecordingRunner()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Return a project root whose ``target/doc`` exists (and is empty)."""
    (tmp_path / "target" / "doc").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def bare_project(tmp_path: Path) -> Path:
    """Return a project root without generated documentation."""
    return tmp_path


def make_config(root: Path, **overrides: Any) -> PreviewConfig:
    """Return a frozen config rooted at ``root`` with ``overrides`` applied.

    Args:
        root (Path): Project root.
        **overrides (Any): Field overrides applied on the mutable builder.

    Returns:
        PreviewConfig: An immutable configuration snapshot.
    """
    m = MutablePreviewConfig.from_defaults(root)
    m.apply_overrides(**overrides)
    return m.freeze()
