"""Locate the Salesforce DX project that encloses the working directory."""

from __future__ import annotations

import logging
from pathlib import Path

from lwctest.core.errors import ProjectNotFoundError

PROJECT_FILE_NAME = "sfdx-project.json"

logger = logging.getLogger(__name__)


def find_project_root(start: Path | None = None) -> Path:
    """Return the closest ancestor of *start* that contains ``sfdx-project.json``."""
    origin = (start or Path.cwd()).resolve()
    for candidate in (origin, *origin.parents):
        if (candidate / PROJECT_FILE_NAME).is_file():
            logger.debug("Resolved project root", extra={"project_root": str(candidate)})
            return candidate
    message = (
        "This command is required to run from within a Salesforce project "
        f"directory (no {PROJECT_FILE_NAME} found above {origin})."
    )
    raise ProjectNotFoundError(message)


def resolve_project_root(override: str | Path | None = None, *, start: Path | None = None) -> Path:
    """Return *override* when configured, otherwise search upwards from *start*."""
    if override is None or str(override) == "":
        return find_project_root(start)
    root = Path(override).expanduser().resolve()
    if not root.is_dir():
        message = f"Configured project root does not exist: {root}"
        raise ProjectNotFoundError(message)
    return root


__all__ = ["PROJECT_FILE_NAME", "find_project_root", "resolve_project_root"]
