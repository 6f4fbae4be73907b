"""Locate and run the ``sfdx-lwc-jest`` executable installed in a project."""

from __future__ import annotations

import logging
import subprocess
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from lwctest.core.errors import ExecutableNotFoundError, RunnerExecutionError

if TYPE_CHECKING:
    from subprocess import CompletedProcess

Runner = Callable[..., "CompletedProcess[bytes]"]

RUNNER_NAME = "sfdx-lwc-jest"
DEFAULT_FAILURE_EXIT_CODE = 1

_POSIX_RELATIVE_PATH = Path("node_modules", ".bin", RUNNER_NAME)
_WINDOWS_RELATIVE_PATH = Path("node_modules", "@salesforce", RUNNER_NAME, "bin", RUNNER_NAME)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunnerExecutable:
    """Resolved runner location plus the interpreter prefix it requires."""

    path: Path
    prefix: tuple[str, ...] = ()

    def command(self, args: Sequence[str]) -> list[str]:
        """Return the full command line for *args*."""
        return [*self.prefix, str(self.path), *args]


@dataclass(frozen=True)
class ExecutionOutcome:
    """Exit status of a finished runner process."""

    args: tuple[str, ...]
    returncode: int


def _is_windows(platform: str) -> bool:
    return platform == "win32"


def resolve_executable(project_root: Path, *, platform: str | None = None) -> RunnerExecutable:
    """Return the runner installed under *project_root* for the host platform.

    On Windows the ``.bin`` shim cannot be executed directly, so the package's
    own script is run through ``node``.
    """
    current_platform = sys.platform if platform is None else platform
    if _is_windows(current_platform):
        executable = RunnerExecutable(project_root / _WINDOWS_RELATIVE_PATH, prefix=("node",))
    else:
        executable = RunnerExecutable(project_root / _POSIX_RELATIVE_PATH)

    if not executable.path.exists():
        message = (
            f"Could not find {RUNNER_NAME} executable at {executable.path}. "
            f"Install it with 'npm install --save-dev @salesforce/{RUNNER_NAME}' "
            "and run the command again."
        )
        raise ExecutableNotFoundError(message)
    return executable


def normalize_returncode(returncode: int | None) -> int:
    """Map a missing or signal-induced (negative) status to a failure code."""
    if returncode is None or returncode < 0:
        return DEFAULT_FAILURE_EXIT_CODE
    return returncode


class JestExecutor:
    """Blocking runner invocation that inherits the terminal's standard streams."""

    def __init__(
        self,
        executable: RunnerExecutable,
        *,
        runner: Runner = subprocess.run,
        cwd: Path | None = None,
    ) -> None:
        self._executable = executable
        self._runner: Runner = runner
        self._cwd = cwd

    def run(self, args: Sequence[str]) -> ExecutionOutcome:
        """Run the external runner with *args* and wait for it to exit."""
        command = self._executable.command(args)
        logger.info("Starting %s", RUNNER_NAME, extra={"command": command})
        try:
            completed = self._runner(command, check=False, cwd=self._cwd, shell=False)
        except OSError as error:
            message = f"Failed to start {RUNNER_NAME}: {error}"
            raise RunnerExecutionError(message) from error

        returncode = normalize_returncode(completed.returncode)
        logger.info(
            "%s exited",
            RUNNER_NAME,
            extra={"raw_returncode": completed.returncode, "exit_code": returncode},
        )
        return ExecutionOutcome(args=tuple(args), returncode=returncode)


__all__ = [
    "DEFAULT_FAILURE_EXIT_CODE",
    "RUNNER_NAME",
    "ExecutionOutcome",
    "JestExecutor",
    "Runner",
    "RunnerExecutable",
    "normalize_returncode",
    "resolve_executable",
]
