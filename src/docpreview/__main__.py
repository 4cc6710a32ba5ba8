# topmark:header:start
#
#   project      : DocPreview
#   file         : __main__.py
#   file_relpath : src/docpreview/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running DocPreview via ``python -m docpreview``.

Delegates to :func:`docpreview.cli.main.cli`, the same Click group that backs
the ``docpreview`` console script.

Examples:
    Start the preview container for the current project::

        python -m docpreview
"""

from __future__ import annotations

from docpreview.cli.main import cli

if __name__ == "__main__":
    cli()
