"""Pydantic result models returned by the lwctest commands."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RunResult(BaseModel):
    """Outcome of a ``run`` invocation, relayed from the external runner."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    message: str
    jest_exit_code: int = Field(alias="jestExitCode")

    @property
    def succeeded(self) -> bool:
        """Return ``True`` when the runner reported success."""
        return self.jest_exit_code == 0


class CreateResult(BaseModel):
    """Outcome of a ``create`` invocation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    message: str
    test_path: str = Field(alias="testPath")
    class_name: str = Field(alias="className")
    element_name: str = Field(alias="elementName")


__all__ = ["CreateResult", "RunResult"]
