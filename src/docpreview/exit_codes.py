# topmark:header:start
#
#   project      : DocPreview
#   file         : exit_codes.py
#   file_relpath : src/docpreview/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the DocPreview CLI.

DocPreview aligns with the BSD `sysexits` convention for the failures it detects
itself. Everything else is the container runtime's own exit status, passed
through unchanged, so callers should only rely on the named values below for
conditions DocPreview reports.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for DocPreview.

    Attributes:
        SUCCESS: The preview container exited cleanly (or a subcommand succeeded).
        FAILURE: The documentation directory is missing ("doc isn't ready").
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        CONFIG_ERROR: Configuration error (malformed TOML, wrong value types,
            port out of range). Mirrors BSD ``EX_CONFIG (78)``.
        RUNTIME_NOT_FOUND: The container runtime executable is not installed or
            not on ``PATH``. Mirrors the shell's "command not found" (127).
        INTERRUPTED: The attached session was interrupted with Ctrl+C. Mirrors
            the shell convention ``128 + SIGINT``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    CONFIG_ERROR = 78  # EX_CONFIG

    # shell-aligned values
    RUNTIME_NOT_FOUND = 127
    INTERRUPTED = 130
