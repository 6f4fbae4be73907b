"""End-to-end ``run`` workflow: classify, validate, rearrange, execute, report."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from lwctest.core.flags import FLAG_REGISTRY, FlagRegistry
from lwctest.runner.argv import build_invocation
from lwctest.runner.executor import JestExecutor, Runner, resolve_executable
from lwctest.runner.reporter import build_run_result

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from lwctest.core.models import RunResult

logger = logging.getLogger(__name__)


@dataclass
class TestRunPipeline:
    """Relay a mixed command line to the project's ``sfdx-lwc-jest``."""

    __test__ = False

    project_root: Path
    runner: Runner = subprocess.run
    platform: str | None = None
    registry: FlagRegistry = field(default=FLAG_REGISTRY)

    def run(self, raw_tokens: Iterable[str]) -> RunResult:
        """Execute the runner for *raw_tokens* and return its relayed result.

        Flag conflicts and a missing executable raise before any process is
        spawned; after that the runner's exit status is reported as-is.
        """
        invocation = build_invocation(raw_tokens, self.registry)
        executable = resolve_executable(self.project_root, platform=self.platform)
        executor = JestExecutor(executable, runner=self.runner)
        outcome = executor.run(invocation)
        result = build_run_result(outcome.returncode)
        logger.debug("Run finished", extra={"result": result.model_dump(by_alias=True)})
        return result


__all__ = ["TestRunPipeline"]
