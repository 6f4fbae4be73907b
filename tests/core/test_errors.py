"""Tests for the lwctest error hierarchy and integration points."""

from __future__ import annotations

import pytest

from lwctest.cli.app import CliError
from lwctest.core.errors import (
    ComponentFileNotFoundError,
    ConfigurationError,
    ExecutableNotFoundError,
    ExecutionError,
    InvalidModuleFileError,
    LwcTestError,
    LwcTestValidationError,
    MutuallyExclusiveFlagsError,
    ProjectNotFoundError,
    RunnerExecutionError,
    TestFileExistsError,
)
from lwctest.runner.argv import validate_exclusive


def test_error_hierarchy() -> None:
    """Specialised errors should remain anchored to the LwcTestError base."""
    for error_type in (
        MutuallyExclusiveFlagsError,
        ConfigurationError,
        InvalidModuleFileError,
        ComponentFileNotFoundError,
        TestFileExistsError,
    ):
        assert issubclass(error_type, LwcTestValidationError)
    assert issubclass(ExecutableNotFoundError, ExecutionError)
    assert issubclass(RunnerExecutionError, ExecutionError)
    assert issubclass(ExecutionError, LwcTestError)
    assert issubclass(ProjectNotFoundError, LwcTestError)


def test_mutually_exclusive_message_names_both_flags() -> None:
    """The conflict error names the offending flags."""
    with pytest.raises(MutuallyExclusiveFlagsError) as excinfo:
        validate_exclusive(["--watch", "--debug"])

    assert str(excinfo.value) == "--debug and --watch are mutually exclusive."


def test_cli_error_inherits_base_error() -> None:
    """The CLI surfaces anticipated failures via LwcTestError subclasses."""
    error = CliError("boom", exit_code=2)
    assert isinstance(error, LwcTestError)
    assert error.exit_code == 2
    assert error.details is None
