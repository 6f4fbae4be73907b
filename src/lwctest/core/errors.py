"""Domain-specific exception hierarchy for lwctest."""

from __future__ import annotations


class LwcTestError(Exception):
    """Base class for all domain-specific errors raised by lwctest."""


class LwcTestValidationError(LwcTestError):
    """Raised when inputs, configuration, or flags fail validation rules."""


class MutuallyExclusiveFlagsError(LwcTestValidationError):
    """Raised when two flags that cannot be combined are both supplied."""

    def __init__(self, first: str, second: str) -> None:
        super().__init__(f"--{first} and --{second} are mutually exclusive.")
        self.flags = (first, second)


class ConfigurationError(LwcTestValidationError):
    """Raised when the CLI configuration file or environment is invalid."""


class InvalidModuleFileError(LwcTestValidationError):
    """Raised when a test file is requested for something that is not a JavaScript module."""


class ComponentFileNotFoundError(LwcTestValidationError):
    """Raised when the component module a test is requested for does not exist."""


class TestFileExistsError(LwcTestValidationError):
    """Raised when the generated test file would overwrite an existing one."""

    __test__ = False


class ProjectNotFoundError(LwcTestError):
    """Raised when no Salesforce DX project encloses the working directory."""


class ExecutionError(LwcTestError):
    """Base class for failures that prevent the external runner from starting."""


class ExecutableNotFoundError(ExecutionError):
    """Raised when the runner executable is missing from ``node_modules``."""


class RunnerExecutionError(ExecutionError):
    """Raised when the operating system refuses to spawn the runner."""


__all__ = [
    "ComponentFileNotFoundError",
    "ConfigurationError",
    "ExecutableNotFoundError",
    "ExecutionError",
    "InvalidModuleFileError",
    "LwcTestError",
    "LwcTestValidationError",
    "MutuallyExclusiveFlagsError",
    "ProjectNotFoundError",
    "RunnerExecutionError",
    "TestFileExistsError",
]
