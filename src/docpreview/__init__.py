# topmark:header:start
#
#   project      : DocPreview
#   file         : __init__.py
#   file_relpath : src/docpreview/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocPreview package.

DocPreview serves a locally generated documentation tree through a throwaway
nginx container so it can be previewed in a browser. It exposes a small CLI
and the [`launch_preview`][docpreview.launcher.launch_preview] entry point for
automation.
"""

from __future__ import annotations
