# topmark:header:start
#
#   project      : DocPreview
#   file         : __init__.py
#   file_relpath : src/docpreview/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for DocPreview: model, TOML loading and logging setup."""

from __future__ import annotations

from docpreview.config.loaders import build_config, render_config_toml
from docpreview.config.model import MutablePreviewConfig, PreviewConfig

__all__ = [
    "MutablePreviewConfig",
    "PreviewConfig",
    "build_config",
    "render_config_toml",
]
