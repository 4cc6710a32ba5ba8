# topmark:header:start
#
#   project      : DocPreview
#   file         : __init__.py
#   file_relpath : src/docpreview/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocPreview CLI package.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        docpreview = "docpreview.cli.main:cli"

All subcommands live in [`docpreview.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
