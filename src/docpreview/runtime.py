# topmark:header:start
#
#   project      : DocPreview
#   file         : runtime.py
#   file_relpath : src/docpreview/runtime.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Container runtime adapter.

Builds the argument vectors for the runtime CLI (``docker`` by default, any
CLI-compatible runtime such as ``podman`` works) and runs them as subprocesses.
The subprocess entry point is injectable so tests can record invocations
without a runtime installed.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from docpreview.config.logging import get_logger
from docpreview.constants import DEFAULT_RUNTIME
from docpreview.errors import RuntimeNotFoundError

if TYPE_CHECKING:
    from pathlib import Path

    from docpreview.config.logging import DocPreviewLogger

logger: DocPreviewLogger = get_logger(__name__)

Runner = Callable[..., "subprocess.CompletedProcess[Any]"]


def shell_exit_status(returncode: int) -> int:
    """Map a `subprocess` returncode to the status a shell would report.

    Negative values mean "terminated by signal N" and become ``128 + N``.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode


@dataclass(frozen=True)
class ContainerRunSpec:
    """Everything needed to start the preview container.

    Attributes:
        name (str): Container name; reassigned to the new instance.
        image (str): Image reference to run.
        host_port (int): Published host port.
        container_port (int): Target port inside the container.
        mount_source (Path): Host directory to bind-mount.
        mount_target (str): Mount point inside the container.
        interactive (bool): Keep STDIN open and allocate a TTY (``-it``).
        read_only (bool): Append ``:ro`` to the bind mount.
        auto_remove (bool): Remove the container when it exits (``--rm``).
    """

    name: str
    image: str
    host_port: int
    container_port: int
    mount_source: Path
    mount_target: str
    interactive: bool = True
    read_only: bool = False
    auto_remove: bool = True

    @property
    def port_mapping(self) -> str:
        """``HOST:CONTAINER`` publish argument."""
        return f"{self.host_port}:{self.container_port}"

    @property
    def volume(self) -> str:
        """``SOURCE:TARGET[:ro]`` bind-mount argument."""
        volume = f"{self.mount_source}:{self.mount_target}"
        return f"{volume}:ro" if self.read_only else volume


class ContainerRuntime:
    """Thin wrapper around a container runtime CLI.

    Args:
        executable (str): Runtime executable name or path.
        runner (Runner | None): Callable with the `subprocess.run` signature.
        dry_run (bool): Log commands instead of executing them; every call
            then reports success.
    """

    def __init__(
        self,
        executable: str = DEFAULT_RUNTIME,
        *,
        runner: Runner | None = None,
        dry_run: bool = False,
    ) -> None:
        self.executable = executable
        self.runner: Runner = runner or subprocess.run
        self.dry_run = dry_run
        # argv of every command skipped by a dry run, in order
        self.dry_run_log: list[list[str]] = []

    def remove_command(self, name: str) -> list[str]:
        """Return the argv that force-removes container ``name``."""
        return [self.executable, "rm", "-f", name]

    def run_command(self, spec: ContainerRunSpec) -> list[str]:
        """Return the argv that starts the container described by ``spec``."""
        argv: list[str] = [self.executable, "run"]
        if spec.interactive:
            argv.append("-it")
        argv += ["--name", spec.name, "-p", spec.port_mapping]
        if spec.auto_remove:
            argv.append("--rm")
        argv += ["-v", spec.volume, spec.image]
        return argv

    def _execute(self, argv: list[str], **kwargs: Any) -> subprocess.CompletedProcess[Any]:
        if self.dry_run:
            self.dry_run_log.append(argv)
            logger.info("dry-run: %s", " ".join(argv))
            return subprocess.CompletedProcess(argv, 0)
        logger.debug("exec: %s", " ".join(argv))
        try:
            return self.runner(argv, check=False, **kwargs)
        except FileNotFoundError as exc:
            raise RuntimeNotFoundError(self.executable) from exc

    def remove(self, name: str) -> int:
        """Force-remove container ``name`` if it exists.

        The runtime's output is captured and only logged; a missing container
        is not an error.

        Returns:
            int: The runtime's exit status (informational).
        """
        result = self._execute(self.remove_command(name), capture_output=True, text=True)
        if result.returncode != 0:
            logger.debug(
                "rm -f %s exited with %d: %s",
                name,
                result.returncode,
                (result.stderr or "").strip(),
            )
        else:
            logger.trace("removed container %s", name)
        return result.returncode

    def run(self, spec: ContainerRunSpec) -> int:
        """Start the container attached to the calling terminal and wait for it.

        A client killed by signal N is reported the way a shell does, as
        ``128 + N``.

        Returns:
            int: The container run's exit status.
        """
        result = self._execute(self.run_command(spec))
        logger.debug("run %s exited with %d", spec.name, result.returncode)
        return shell_exit_status(result.returncode)
