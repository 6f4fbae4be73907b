"""Core types shared across lwctest commands."""

from .errors import (
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
from .flags import FLAG_REGISTRY, PASSTHROUGH_MARKER, FlagDefinition, FlagRegistry
from .models import CreateResult, RunResult

__all__ = [
    "FLAG_REGISTRY",
    "PASSTHROUGH_MARKER",
    "ComponentFileNotFoundError",
    "ConfigurationError",
    "CreateResult",
    "ExecutableNotFoundError",
    "ExecutionError",
    "FlagDefinition",
    "FlagRegistry",
    "InvalidModuleFileError",
    "LwcTestError",
    "LwcTestValidationError",
    "MutuallyExclusiveFlagsError",
    "ProjectNotFoundError",
    "RunResult",
    "RunnerExecutionError",
    "TestFileExistsError",
]
