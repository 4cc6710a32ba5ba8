# topmark:header:start
#
#   project      : DocPreview
#   file         : model.py
#   file_relpath : src/docpreview/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Preview configuration model.

Configuration is built on a mutable builder and frozen into an immutable
snapshot before it reaches the launcher:

- [`MutablePreviewConfig`][docpreview.config.model.MutablePreviewConfig] starts
  from the built-in defaults and receives TOML tables and CLI overrides in
  precedence order (defaults < config files < CLI).
- [`PreviewConfig`][docpreview.config.model.PreviewConfig] is the frozen result;
  call `thaw()` to get an editable copy.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from docpreview.config.keys import Toml
from docpreview.config.logging import get_logger
from docpreview.constants import (
    DEFAULT_CONTAINER_NAME,
    DEFAULT_CONTAINER_PORT,
    DEFAULT_DOC_DIR,
    DEFAULT_HOST_PORT,
    DEFAULT_IMAGE,
    DEFAULT_RUNTIME,
    DEFAULT_WEB_ROOT,
)
from docpreview.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from docpreview.config.logging import DocPreviewLogger

logger: DocPreviewLogger = get_logger(__name__)

MIN_PORT = 1
MAX_PORT = 65535


@dataclass(frozen=True)
class PreviewConfig:
    """Immutable, validated preview settings.

    Attributes:
        root (Path): Absolute project root; ``doc_dir`` resolves against it.
        doc_dir (str): Documentation directory, relative to ``root`` or absolute.
        image (str): Pinned web server image reference.
        container_name (str): Fixed name reserved for the preview container.
        host_port (int): Host TCP port published to the container.
        container_port (int): Port the web server listens on inside the container.
        web_root (str): Container path the documentation is mounted on.
        runtime (str): Container runtime executable (``docker``, ``podman``...).
        interactive (bool): Attach an interactive TTY session (``-it``).
        read_only (bool): Mount the documentation read-only (``:ro``).
        config_files (tuple[Path, ...]): Config files that contributed, in order.
    """

    root: Path
    doc_dir: str = DEFAULT_DOC_DIR
    image: str = DEFAULT_IMAGE
    container_name: str = DEFAULT_CONTAINER_NAME
    host_port: int = DEFAULT_HOST_PORT
    container_port: int = DEFAULT_CONTAINER_PORT
    web_root: str = DEFAULT_WEB_ROOT
    runtime: str = DEFAULT_RUNTIME
    interactive: bool = True
    read_only: bool = False
    config_files: tuple[Path, ...] = ()

    @property
    def doc_path(self) -> Path:
        """Absolute path of the documentation artifact directory."""
        p = Path(self.doc_dir)
        return p if p.is_absolute() else self.root / p

    @property
    def url(self) -> str:
        """Browser URL of the preview."""
        return f"http://localhost:{self.host_port}"

    def thaw(self) -> MutablePreviewConfig:
        """Return an editable copy of this snapshot."""
        return MutablePreviewConfig(
            root=self.root,
            doc_dir=self.doc_dir,
            image=self.image,
            container_name=self.container_name,
            host_port=self.host_port,
            container_port=self.container_port,
            web_root=self.web_root,
            runtime=self.runtime,
            interactive=self.interactive,
            read_only=self.read_only,
            config_files=list(self.config_files),
        )

    def to_toml_dict(self) -> dict[str, Any]:
        """Return the settings as a ``[tool.docpreview]``-shaped mapping."""
        return {
            Toml.DOC_DIR: self.doc_dir,
            Toml.IMAGE: self.image,
            Toml.CONTAINER_NAME: self.container_name,
            Toml.HOST_PORT: self.host_port,
            Toml.CONTAINER_PORT: self.container_port,
            Toml.WEB_ROOT: self.web_root,
            Toml.RUNTIME: self.runtime,
            Toml.INTERACTIVE: self.interactive,
            Toml.READ_ONLY: self.read_only,
        }


@dataclass
class MutablePreviewConfig:
    """Builder for [`PreviewConfig`][docpreview.config.model.PreviewConfig]."""

    root: Path
    doc_dir: str = DEFAULT_DOC_DIR
    image: str = DEFAULT_IMAGE
    container_name: str = DEFAULT_CONTAINER_NAME
    host_port: int = DEFAULT_HOST_PORT
    container_port: int = DEFAULT_CONTAINER_PORT
    web_root: str = DEFAULT_WEB_ROOT
    runtime: str = DEFAULT_RUNTIME
    interactive: bool = True
    read_only: bool = False
    config_files: list[Path] = field(default_factory=list)

    @classmethod
    def from_defaults(cls, root: Path | None = None) -> MutablePreviewConfig:
        """Create a builder holding the built-in defaults.

        Args:
            root (Path | None): Project root; defaults to the current working directory.

        Returns:
            MutablePreviewConfig: A fresh builder.
        """
        return cls(root=(root or Path.cwd()).resolve())

    def merge_table(self, table: Mapping[str, Any], *, source: Path | None = None) -> None:
        """Apply a ``[tool.docpreview]`` table on top of the current values.

        Unknown keys are logged and ignored; values of the wrong type raise.

        Raises:
            ConfigError: If a known key holds a value of the wrong type.
        """
        for key, value in table.items():
            if key not in Toml.ALL_KEYS:
                logger.warning("Ignoring unknown config key '%s' in %s", key, source)
                continue
            if key in Toml.STRING_KEYS:
                ok = isinstance(value, str)
                expected = "a string"
            elif key in Toml.INT_KEYS:
                # bool is an int subclass; reject `host_port = true`
                ok = isinstance(value, int) and not isinstance(value, bool)
                expected = "an integer"
            else:
                ok = isinstance(value, bool)
                expected = "a boolean"
            if not ok:
                raise ConfigError(
                    f"'{key}' must be {expected}, got {type(value).__name__}", source=source
                )
            setattr(self, key, value)
            logger.trace("config %s = %r (from %s)", key, value, source)

        if source is not None:
            self.config_files.append(source)

    def apply_overrides(self, **overrides: Any) -> None:
        """Apply CLI overrides; ``None`` values mean "not given" and are skipped."""
        for key, value in overrides.items():
            if value is None:
                continue
            if not hasattr(self, key):
                raise ConfigError(f"Unknown override '{key}'")
            setattr(self, key, value)
            logger.debug("override %s = %r", key, value)

    def freeze(self) -> PreviewConfig:
        """Validate and return an immutable snapshot.

        Raises:
            ConfigError: If a port is out of range or a required name is empty.
        """
        for key in (Toml.HOST_PORT, Toml.CONTAINER_PORT):
            port = getattr(self, key)
            if not MIN_PORT <= port <= MAX_PORT:
                raise ConfigError(f"'{key}' must be between {MIN_PORT} and {MAX_PORT}, got {port}")
        for key in Toml.STRING_KEYS:
            if not str(getattr(self, key)).strip():
                raise ConfigError(f"'{key}' must not be empty")

        return PreviewConfig(
            root=self.root.resolve(),
            doc_dir=self.doc_dir,
            image=self.image,
            container_name=self.container_name,
            host_port=self.host_port,
            container_port=self.container_port,
            web_root=self.web_root,
            runtime=self.runtime,
            interactive=self.interactive,
            read_only=self.read_only,
            config_files=tuple(self.config_files),
        )
