# topmark:header:start
#
#   project      : DocPreview
#   file         : serve.py
#   file_relpath : src/docpreview/cli/commands/serve.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocPreview `serve` command (also the group's default action).

Restarts the preview container and stays attached to it. The process exit
status is the container's, except for the conditions DocPreview reports itself
(see [`ExitCode`][docpreview.exit_codes.ExitCode]).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docpreview.cli.cmd_common import get_effective_verbosity, resolve_config_from_click
from docpreview.cli.errors import to_cli_error
from docpreview.cli.keys import ArgKey, CliCmd
from docpreview.config.logging import get_logger
from docpreview.errors import DocsNotReadyError, RuntimeNotFoundError
from docpreview.exit_codes import ExitCode
from docpreview.launcher import build_run_spec, check_docs_ready, launch_preview
from docpreview.runtime import ContainerRuntime

if TYPE_CHECKING:
    from docpreview.cli.console_api import ConsoleLike
    from docpreview.config.logging import DocPreviewLogger

logger: DocPreviewLogger = get_logger(__name__)


@click.command(
    name=CliCmd.SERVE,
    help="Restart the documentation preview container (default action).",
)
@click.pass_context
def serve_command(ctx: click.Context) -> None:
    """Restart the preview container and attach to it."""
    console: ConsoleLike = ctx.obj[ArgKey.CONSOLE]
    vlevel = get_effective_verbosity(ctx)
    dry_run = bool(ctx.obj.get(ArgKey.DRY_RUN))

    config = resolve_config_from_click(ctx)
    logger.debug("serve: root=%s dry_run=%s verbosity=%d", config.root, dry_run, vlevel)
    runtime = ContainerRuntime(
        config.runtime,
        runner=ctx.obj.get(ArgKey.RUNNER),
        dry_run=dry_run,
    )

    try:
        doc_path = check_docs_ready(config)
    except DocsNotReadyError as exc:
        console.print(str(exc))
        if vlevel >= 0:
            console.print(f"Expected documentation in {exc.path}")
        ctx.exit(ExitCode.FAILURE)

    if dry_run or vlevel > 0:
        console.print(" ".join(runtime.remove_command(config.container_name)))
        console.print(" ".join(runtime.run_command(build_run_spec(config))))
    if vlevel >= 0 and not dry_run:
        console.print(
            console.styled(f"Serving {doc_path} at {config.url}", fg="green") + " (Ctrl+C to stop)"
        )

    try:
        code = launch_preview(config, runtime)
    except RuntimeNotFoundError as exc:
        raise to_cli_error(exc) from exc

    ctx.exit(code)
