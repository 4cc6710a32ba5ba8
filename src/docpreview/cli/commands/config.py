# topmark:header:start
#
#   project      : DocPreview
#   file         : config.py
#   file_relpath : src/docpreview/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocPreview `config` command.

Prints the effective configuration (defaults, config files and CLI overrides
merged) as TOML, ready to be saved as ``docpreview.toml`` or pasted into
``pyproject.toml`` with ``--pyproject``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docpreview.cli.cmd_common import get_effective_verbosity, resolve_config_from_click
from docpreview.cli.keys import ArgKey, CliCmd, CliOpt
from docpreview.config.loaders import render_config_toml

if TYPE_CHECKING:
    from docpreview.cli.console_api import ConsoleLike


@click.command(
    name=CliCmd.CONFIG,
    help="Show the effective configuration as TOML.",
)
@click.option(
    CliOpt.CONFIG_FOR_PYPROJECT,
    "pyproject",
    is_flag=True,
    default=False,
    help="Nest the output under [tool.docpreview] for pyproject.toml.",
)
@click.pass_context
def config_command(ctx: click.Context, *, pyproject: bool) -> None:
    """Show the effective configuration as TOML."""
    console: ConsoleLike = ctx.obj[ArgKey.CONSOLE]
    config = resolve_config_from_click(ctx)

    if get_effective_verbosity(ctx) > 0:
        sources = ", ".join(str(p) for p in config.config_files) or "<defaults>"
        console.print(console.styled(f"# sources: {sources}", dim=True))
        console.print(console.styled(f"# docs: {config.doc_path}", dim=True))

    console.print(render_config_toml(config, pyproject=pyproject), nl=False)
