# topmark:header:start
#
#   project      : DocPreview
#   file         : version.py
#   file_relpath : src/docpreview/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocPreview `version` command.

Prints the DocPreview version as installed in the active Python environment,
as PEP 440 (default) or SemVer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docpreview.cli.cmd_common import get_effective_verbosity
from docpreview.cli.keys import ArgKey, CliCmd, CliOpt
from docpreview.constants import DOCPREVIEW_VERSION
from docpreview.utils.version import pep440_to_semver

if TYPE_CHECKING:
    from docpreview.cli.console_api import ConsoleLike


@click.command(
    name=CliCmd.VERSION,
    help="Show the current version of DocPreview.",
)
@click.option(
    CliOpt.SEMVER_VERSION,
    ArgKey.SEMVER_VERSION,
    is_flag=True,
    default=False,
    help="Render the version as SemVer instead of PEP 440 (maps rc→-rc.N, dev→-dev.N).",
)
@click.pass_context
def version_command(ctx: click.Context, *, semver: bool) -> None:
    """Show the current version of DocPreview.

    Args:
        ctx (click.Context): Current Click context.
        semver (bool): Render as SemVer; falls back to PEP 440 if conversion fails.
    """
    console: ConsoleLike = ctx.obj[ArgKey.CONSOLE]
    vlevel = get_effective_verbosity(ctx)

    version_text: str = DOCPREVIEW_VERSION
    version_format = "pep440"
    if semver:
        try:
            version_text = pep440_to_semver(DOCPREVIEW_VERSION)
            version_format = "semver"
        except ValueError as exc:
            if vlevel > 0:
                console.warn(f"[warn] {exc}")

    if vlevel > 0:
        console.print(
            console.styled(f"DocPreview version ({version_format}):", bold=True, underline=True)
        )
        console.print(f"    {console.styled(version_text, bold=True)}")
    else:
        console.print(console.styled(version_text, bold=True))
