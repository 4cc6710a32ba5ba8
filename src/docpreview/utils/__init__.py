# topmark:header:start
#
#   project      : DocPreview
#   file         : __init__.py
#   file_relpath : src/docpreview/utils/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Small helpers without dependencies on the rest of DocPreview."""
