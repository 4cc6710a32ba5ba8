# topmark:header:start
#
#   project      : DocPreview
#   file         : cmd_common.py
#   file_relpath : src/docpreview/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small helpers shared by the subcommands: reading the state the group placed
on ``ctx.obj`` and materializing the effective preview configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docpreview.cli.errors import to_cli_error
from docpreview.cli.keys import ArgKey
from docpreview.config.loaders import build_config
from docpreview.config.logging import get_logger
from docpreview.errors import ConfigError

if TYPE_CHECKING:
    import click

    from docpreview.config.logging import DocPreviewLogger
    from docpreview.config.model import PreviewConfig

logger: DocPreviewLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored by the group (0 when absent)."""
    return int(ctx.obj.get(ArgKey.VERBOSITY_LEVEL, 0))


def resolve_config_from_click(ctx: click.Context) -> PreviewConfig:
    """Build the effective config from the options stored on ``ctx.obj``.

    Raises:
        DocPreviewConfigError: If the configuration is invalid.
    """
    try:
        return build_config(
            root=ctx.obj.get(ArgKey.ROOT),
            config_paths=ctx.obj.get(ArgKey.CONFIG_PATHS, ()),
            no_config=bool(ctx.obj.get(ArgKey.NO_CONFIG)),
            host_port=ctx.obj.get(ArgKey.HOST_PORT),
        )
    except ConfigError as exc:
        logger.debug("configuration rejected: %s", exc)
        raise to_cli_error(exc) from exc
