"""Create and run Lightning web component Jest tests from the command line."""

from .core.flags import FLAG_REGISTRY, FlagDefinition, FlagRegistry
from .core.models import CreateResult, RunResult

__version__ = "0.1.0"

__all__ = [
    "FLAG_REGISTRY",
    "CreateResult",
    "FlagDefinition",
    "FlagRegistry",
    "RunResult",
    "__version__",
]
