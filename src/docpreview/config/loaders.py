# topmark:header:start
#
#   project      : DocPreview
#   file         : loaders.py
#   file_relpath : src/docpreview/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Discover and load DocPreview configuration from TOML.

Sources, in order of discovery:

- explicit ``--config`` files (all of them, in the order given), otherwise
- ``<root>/docpreview.toml``, otherwise
- the ``[tool.docpreview]`` table of ``<root>/pyproject.toml``.

Parsing is done with `tomlkit`; documents are unwrapped to plain ``dict``
structures before they reach the config builder.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from docpreview.config.keys import Toml
from docpreview.config.logging import get_logger
from docpreview.config.model import MutablePreviewConfig
from docpreview.constants import DOCPREVIEW_TOML_NAME, PYPROJECT_TOML_NAME
from docpreview.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from docpreview.config.logging import DocPreviewLogger
    from docpreview.config.model import PreviewConfig

logger: DocPreviewLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Read and parse a TOML file into a plain dict.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read config file: {exc.strerror or exc}", source=path) from exc
    try:
        doc = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"invalid TOML: {exc}", source=path) from exc
    logger.debug("Loaded TOML from %s", path)
    return doc.unwrap()


def extract_docpreview_table(data: dict[str, Any], path: Path) -> dict[str, Any] | None:
    """Return the DocPreview settings held in a parsed TOML document.

    ``pyproject.toml`` keeps them under ``[tool.docpreview]``; any other file is
    treated as a dedicated config whose top level is the settings table.

    Raises:
        ConfigError: If ``[tool]`` or the settings are not a table.
    """
    if path.name == PYPROJECT_TOML_NAME:
        tool = data.get(Toml.TOOL_TABLE, {})
        if not isinstance(tool, dict):
            raise ConfigError("[tool] must be a table", source=path)
        table = tool.get(Toml.DOCPREVIEW_TABLE)
        if table is None:
            return None
    else:
        table = data
    if not isinstance(table, dict):
        raise ConfigError("[tool.docpreview] must be a table", source=path)
    return table


def discover_config_files(root: Path) -> list[Path]:
    """Return the config file to use for ``root``, if any.

    ``docpreview.toml`` wins over ``pyproject.toml``; a ``pyproject.toml``
    only counts when it carries a ``[tool.docpreview]`` table.
    """
    dedicated = root / DOCPREVIEW_TOML_NAME
    if dedicated.is_file():
        return [dedicated]
    pyproject = root / PYPROJECT_TOML_NAME
    if pyproject.is_file():
        data = load_toml_dict(pyproject)
        if extract_docpreview_table(data, pyproject) is not None:
            return [pyproject]
        logger.debug("%s has no [tool.docpreview] table", pyproject)
    return []


def build_config(
    *,
    root: Path | None = None,
    config_paths: Sequence[Path] = (),
    no_config: bool = False,
    **overrides: Any,
) -> PreviewConfig:
    """Materialize a frozen config from defaults, config files and overrides.

    Args:
        root (Path | None): Project root; defaults to the current working directory.
        config_paths (Sequence[Path]): Explicit config files; disables discovery.
        no_config (bool): Skip config discovery entirely (explicit files still apply).
        **overrides (Any): CLI-level overrides (``host_port=...``); ``None`` is ignored.

    Returns:
        PreviewConfig: The validated configuration.
    """
    builder = MutablePreviewConfig.from_defaults(root)

    if config_paths:
        files = [Path(p).resolve() for p in config_paths]
    elif no_config:
        files = []
    else:
        files = discover_config_files(builder.root)

    for path in files:
        table = extract_docpreview_table(load_toml_dict(path), path)
        if table:
            builder.merge_table(table, source=path)

    builder.apply_overrides(**overrides)
    config = builder.freeze()
    logger.debug("Effective config: %s", config)
    return config


def render_config_toml(config: PreviewConfig, *, pyproject: bool = False) -> str:
    """Render the effective settings as TOML.

    Args:
        config (PreviewConfig): Settings to render.
        pyproject (bool): Nest the settings under ``[tool.docpreview]``.

    Returns:
        str: A TOML document.
    """
    doc = tomlkit.document()
    values = config.to_toml_dict()
    if pyproject:
        settings = tomlkit.table()
        settings.update(values)
        tool = tomlkit.table(is_super_table=True)
        tool.add(Toml.DOCPREVIEW_TABLE, settings)
        doc.add(Toml.TOOL_TABLE, tool)
    else:
        doc.update(values)
    return tomlkit.dumps(doc)
