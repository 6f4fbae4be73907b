"""Tests for lwctest.core.project."""

from __future__ import annotations

from pathlib import Path

import pytest

from lwctest.core.errors import ProjectNotFoundError
from lwctest.core.project import find_project_root, resolve_project_root


def test_find_project_root_walks_upwards(tmp_path: Path) -> None:
    """The nearest ancestor with sfdx-project.json is the project root."""
    (tmp_path / "sfdx-project.json").write_text("{}", encoding="utf-8")
    nested = tmp_path / "force-app" / "main" / "default" / "lwc"
    nested.mkdir(parents=True)

    assert find_project_root(nested) == tmp_path.resolve()


def test_find_project_root_without_project(tmp_path: Path) -> None:
    """Directories outside a project are rejected."""
    with pytest.raises(ProjectNotFoundError, match="Salesforce project"):
        find_project_root(tmp_path)


def test_resolve_project_root_prefers_override(tmp_path: Path) -> None:
    """A configured root skips discovery."""
    assert resolve_project_root(str(tmp_path), start=Path("/")) == tmp_path.resolve()


def test_resolve_project_root_missing_override(tmp_path: Path) -> None:
    """A configured root that does not exist is an error."""
    with pytest.raises(ProjectNotFoundError, match="does not exist"):
        resolve_project_root(tmp_path / "absent")
