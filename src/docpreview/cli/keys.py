# topmark:header:start
#
#   project      : DocPreview
#   file         : keys.py
#   file_relpath : src/docpreview/cli/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical CLI names and context keys for DocPreview.

- ``CliCmd``: subcommand names.
- ``CliOpt``: user-facing long option spellings.
- ``ArgKey``: Click destination keys and the keys stored in ``ctx.obj``.

Neither class holds behavior; they are namespaces for constants.
"""

from __future__ import annotations

from typing import Final


class CliCmd:
    """Command names exposed by the DocPreview CLI."""

    SERVE: Final[str] = "serve"
    CONFIG: Final[str] = "config"
    VERSION: Final[str] = "version"


class CliOpt:
    """User-facing long option spellings (with the leading ``--``)."""

    ROOT: Final[str] = "--root"
    CONFIG_PATHS: Final[str] = "--config"
    NO_CONFIG: Final[str] = "--no-config"
    PORT: Final[str] = "--port"
    DRY_RUN: Final[str] = "--dry-run"

    VERBOSE: Final[str] = "--verbose"
    QUIET: Final[str] = "--quiet"
    COLOR_MODE: Final[str] = "--color"
    NO_COLOR_MODE: Final[str] = "--no-color"

    CONFIG_FOR_PYPROJECT: Final[str] = "--pyproject"
    SEMVER_VERSION: Final[str] = "--semver"


class ArgKey:
    """Destination keys used by Click and stored on ``ctx.obj``."""

    ROOT: Final[str] = "root"
    CONFIG_PATHS: Final[str] = "config_paths"
    NO_CONFIG: Final[str] = "no_config"
    HOST_PORT: Final[str] = "host_port"
    DRY_RUN: Final[str] = "dry_run"

    VERBOSE: Final[str] = "verbose"
    QUIET: Final[str] = "quiet"
    VERBOSITY_LEVEL: Final[str] = "verbosity_level"
    LOG_LEVEL: Final[str] = "log_level"
    COLOR_MODE: Final[str] = "color_mode"
    NO_COLOR_MODE: Final[str] = "no_color"
    COLOR_ENABLED: Final[str] = "color_enabled"
    CONSOLE: Final[str] = "console"

    SEMVER_VERSION: Final[str] = "semver"

    # Injected by tests: replacement for subprocess.run
    RUNNER: Final[str] = "runner"
