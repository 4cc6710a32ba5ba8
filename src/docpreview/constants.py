# topmark:header:start
#
#   project      : DocPreview
#   file         : constants.py
#   file_relpath : src/docpreview/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocPreview Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

DOCPREVIEW_VERSION: str = get_version("docpreview")

# Config file names looked up in the project root:
DOCPREVIEW_TOML_NAME: Final[str] = "docpreview.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"

# Preview defaults
DEFAULT_DOC_DIR: Final[str] = "target/doc"
DEFAULT_IMAGE: Final[str] = "nginx:1.23.4-alpine3.17-slim"
DEFAULT_CONTAINER_NAME: Final[str] = "doc-preview"
DEFAULT_HOST_PORT: Final[int] = 9090
DEFAULT_CONTAINER_PORT: Final[int] = 80
DEFAULT_WEB_ROOT: Final[str] = "/usr/share/nginx/html"
DEFAULT_RUNTIME: Final[str] = "docker"

DOCS_NOT_READY_MESSAGE: Final[str] = "doc isn't ready :("

LOG_LEVEL_ENV_VAR: Final[str] = "DOCPREVIEW_LOG_LEVEL"
