# topmark:header:start
#
#   project      : DocPreview
#   file         : keys.py
#   file_relpath : src/docpreview/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML keys for DocPreview configuration.

These are the stable string contracts between config files
(``docpreview.toml`` or ``[tool.docpreview]`` in ``pyproject.toml``) and
[`MutablePreviewConfig`][docpreview.config.model.MutablePreviewConfig].
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML table and key names."""

    TOOL_TABLE: Final[str] = "tool"
    DOCPREVIEW_TABLE: Final[str] = "docpreview"

    DOC_DIR: Final[str] = "doc_dir"
    IMAGE: Final[str] = "image"
    CONTAINER_NAME: Final[str] = "container_name"
    HOST_PORT: Final[str] = "host_port"
    CONTAINER_PORT: Final[str] = "container_port"
    WEB_ROOT: Final[str] = "web_root"
    RUNTIME: Final[str] = "runtime"
    INTERACTIVE: Final[str] = "interactive"
    READ_ONLY: Final[str] = "read_only"

    STRING_KEYS: Final[tuple[str, ...]] = (
        DOC_DIR,
        IMAGE,
        CONTAINER_NAME,
        WEB_ROOT,
        RUNTIME,
    )
    INT_KEYS: Final[tuple[str, ...]] = (HOST_PORT, CONTAINER_PORT)
    BOOL_KEYS: Final[tuple[str, ...]] = (INTERACTIVE, READ_ONLY)
    ALL_KEYS: Final[frozenset[str]] = frozenset(STRING_KEYS + INT_KEYS + BOOL_KEYS)
