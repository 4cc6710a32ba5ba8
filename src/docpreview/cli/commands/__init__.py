# topmark:header:start
#
#   project      : DocPreview
#   file         : __init__.py
#   file_relpath : src/docpreview/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the DocPreview CLI."""
