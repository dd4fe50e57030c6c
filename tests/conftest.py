"""Pytest fixtures for pkgbump tests."""

import json
from pathlib import Path
from typing import Any, Callable, Generator

import pytest


def make_manifest(directory: Path, name: str, version: str, **extra: Any) -> Path:
    """Write a package.json the way npm formats it."""
    directory.mkdir(parents=True, exist_ok=True)
    data = {"name": name, "version": version, **extra}
    path = directory / "package.json"
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def write_manifest() -> Callable[..., Path]:
    """Expose make_manifest to tests."""
    return make_manifest


@pytest.fixture
def temp_workspace(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory for testing."""
    workspace = tmp_path / "test_workspace"
    workspace.mkdir()
    yield workspace


@pytest.fixture
def temp_workspace_with_manifests(temp_workspace: Path) -> Path:
    """Create a monorepo with three packages at 2.3.4 and a dependency cache."""
    make_manifest(
        temp_workspace,
        "monorepo",
        "2.3.4",
        private=True,
        workspaces=["packages/*"],
    )
    make_manifest(
        temp_workspace / "packages" / "core",
        "@acme/core",
        "2.3.4",
        description="Core library",
        scripts={"build": "tsc -p ."},
    )
    make_manifest(
        temp_workspace / "packages" / "cli",
        "@acme/cli",
        "2.3.4",
        dependencies={"@acme/core": "^2.3.4"},
        bin={"acme": "dist/index.js"},
    )

    # Installed dependencies must never be touched
    make_manifest(temp_workspace / "node_modules" / "left-pad", "left-pad", "1.3.0")
    make_manifest(
        temp_workspace / "packages" / "cli" / "node_modules" / "chalk", "chalk", "5.0.0"
    )

    return temp_workspace
