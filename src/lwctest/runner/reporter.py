"""Turn a runner exit status into a :class:`~lwctest.core.models.RunResult`."""

from __future__ import annotations

from lwctest.core.models import RunResult


def summarize_exit_code(exit_code: int) -> str:
    """Return the human-readable summary line for *exit_code*."""
    if exit_code == 0:
        return "Test run complete. All tests passed (exit code 0)."
    return f"Test run failed with exit code {exit_code}."


def build_run_result(exit_code: int) -> RunResult:
    """Return the structured result for *exit_code*."""
    return RunResult(message=summarize_exit_code(exit_code), jest_exit_code=exit_code)


__all__ = ["build_run_result", "summarize_exit_code"]
