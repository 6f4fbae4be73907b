"""Argument routing and execution for the external test runner."""

from .argv import build_invocation, classify_argv, present_flags, rearrange_args, validate_exclusive
from .executor import (
    DEFAULT_FAILURE_EXIT_CODE,
    RUNNER_NAME,
    ExecutionOutcome,
    JestExecutor,
    RunnerExecutable,
    normalize_returncode,
    resolve_executable,
)
from .pipeline import TestRunPipeline
from .reporter import build_run_result, summarize_exit_code

__all__ = [
    "DEFAULT_FAILURE_EXIT_CODE",
    "RUNNER_NAME",
    "ExecutionOutcome",
    "JestExecutor",
    "RunnerExecutable",
    "TestRunPipeline",
    "build_invocation",
    "build_run_result",
    "classify_argv",
    "normalize_returncode",
    "present_flags",
    "rearrange_args",
    "resolve_executable",
    "summarize_exit_code",
    "validate_exclusive",
]
