# topmark:header:start
#
#   project      : DocPreview
#   file         : launcher.py
#   file_relpath : src/docpreview/launcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Preview launcher.

Check that the documentation has been generated, drop any previous preview
container, then start a fresh one attached to the terminal:

1. ``<root>/<doc_dir>`` must be an existing directory, otherwise
   [`DocsNotReadyError`][docpreview.errors.DocsNotReadyError] is raised and no
   runtime command is issued.
2. ``rm -f <container_name>``; its outcome never fails the launch.
3. ``run -it --name <container_name> -p HOST:CONTAINER --rm -v DOCS:WEB_ROOT IMAGE``.

The launcher returns the exit status of step 3.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docpreview.config.logging import get_logger
from docpreview.errors import DocsNotReadyError
from docpreview.exit_codes import ExitCode
from docpreview.runtime import ContainerRunSpec, ContainerRuntime

if TYPE_CHECKING:
    from pathlib import Path

    from docpreview.config.logging import DocPreviewLogger
    from docpreview.config.model import PreviewConfig

logger: DocPreviewLogger = get_logger(__name__)


def check_docs_ready(config: PreviewConfig) -> Path:
    """Return the documentation directory, or raise if it is missing.

    Raises:
        DocsNotReadyError: If ``config.doc_path`` is not an existing directory.
    """
    path = config.doc_path
    if not path.is_dir():
        logger.debug("documentation directory missing: %s", path)
        raise DocsNotReadyError(path)
    return path


def build_run_spec(config: PreviewConfig) -> ContainerRunSpec:
    """Translate the config into a [`ContainerRunSpec`][docpreview.runtime.ContainerRunSpec]."""
    return ContainerRunSpec(
        name=config.container_name,
        image=config.image,
        host_port=config.host_port,
        container_port=config.container_port,
        mount_source=config.doc_path,
        mount_target=config.web_root,
        interactive=config.interactive,
        read_only=config.read_only,
    )


def launch_preview(config: PreviewConfig, runtime: ContainerRuntime | None = None) -> int:
    """Restart the preview container for ``config``.

    Args:
        config (PreviewConfig): Effective preview settings.
        runtime (ContainerRuntime | None): Runtime adapter; built from
            ``config.runtime`` when omitted.

    Returns:
        int: The container run's exit status, or ``ExitCode.INTERRUPTED`` when
            the attached session is interrupted.

    Raises:
        DocsNotReadyError: If the documentation directory does not exist.
        RuntimeNotFoundError: If the runtime executable cannot be started.
    """
    doc_path = check_docs_ready(config)
    runtime = runtime or ContainerRuntime(config.runtime)

    runtime.remove(config.container_name)

    spec = build_run_spec(config)
    logger.info("Serving %s at %s", doc_path, config.url)
    try:
        return runtime.run(spec)
    except KeyboardInterrupt:
        logger.info("Preview interrupted")
        return ExitCode.INTERRUPTED
