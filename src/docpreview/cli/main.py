# topmark:header:start
#
#   project      : DocPreview
#   file         : main.py
#   file_relpath : src/docpreview/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocPreview Click group.

Group-level options are resolved once and stored in ``ctx.obj``; subcommands
read them from there. Invoking the group without a subcommand runs ``serve``,
so a bare ``docpreview`` restarts the preview container.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docpreview.cli.commands.config import config_command
from docpreview.cli.commands.serve import serve_command
from docpreview.cli.commands.version import version_command
from docpreview.cli.console import ClickConsole
from docpreview.cli.keys import ArgKey
from docpreview.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    preview_options,
    resolve_color_mode,
    resolve_verbosity,
)
from docpreview.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from pathlib import Path

    from docpreview.config.logging import DocPreviewLogger

logger: DocPreviewLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize verbosity, logging and color state on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit ``--color`` value (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj[ArgKey.VERBOSITY_LEVEL] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj[ArgKey.LOG_LEVEL] = level_env
    setup_logging(level=level_env)

    cli_mode = ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=cli_mode)
    ctx.obj[ArgKey.COLOR_ENABLED] = enable_color
    ctx.color = enable_color

    ctx.obj[ArgKey.CONSOLE] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Preview generated documentation through a throwaway nginx container.",
)
@common_verbose_options
@common_color_options
@preview_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    root: Path | None,
    config_paths: tuple[Path, ...],
    no_config: bool,
    host_port: int | None,
    dry_run: bool,
) -> None:
    """Entry point for the DocPreview CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    ctx.obj[ArgKey.ROOT] = root
    ctx.obj[ArgKey.CONFIG_PATHS] = config_paths
    ctx.obj[ArgKey.NO_CONFIG] = no_config
    ctx.obj[ArgKey.HOST_PORT] = host_port
    ctx.obj[ArgKey.DRY_RUN] = dry_run

    if ctx.invoked_subcommand is None:
        logger.debug("no subcommand given; running serve")
        ctx.invoke(serve_command)


cli.add_command(serve_command)

cli.add_command(config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
