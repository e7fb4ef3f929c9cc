"""Shared pytest fixtures for the express-backend-cli test suite.

Provides reusable fixtures for:
- Raw answer dicts and validated configurations (all features, none, demo)
- A shared template renderer
- An in-memory file system for generator tests
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from express_backend_cli.config import ScaffoldConfig, validate_answers
from express_backend_cli.scaffolder import TemplateRenderer


# ---------------------------------------------------------------------------
# Answers & configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def full_answers() -> dict[str, Any]:
    """Answers with every optional feature switched on."""
    return {
        "project_name": "my-api",
        "use_mongodb": True,
        "use_logger": True,
        "use_morgan_logging": True,
        "use_error_handler": True,
        "use_cors": True,
        "service_name": "my-api-service",
        "default_port": 4000,
        "api_version": "v2",
        "create_gitignore": True,
        "create_readme": True,
    }


@pytest.fixture
def demo_answers() -> dict[str, Any]:
    """Answers with every optional feature switched off."""
    return {
        "project_name": "demo",
        "use_mongodb": False,
        "use_logger": False,
        "use_morgan_logging": False,
        "use_error_handler": False,
        "use_cors": False,
        "service_name": "demo",
        "default_port": 3001,
        "api_version": "v1",
        "create_gitignore": False,
        "create_readme": False,
    }


@pytest.fixture
def full_config(full_answers: dict[str, Any]) -> ScaffoldConfig:
    return validate_answers(full_answers)


@pytest.fixture
def demo_config(demo_answers: dict[str, Any]) -> ScaffoldConfig:
    return validate_answers(demo_answers)


@pytest.fixture
def make_config(full_answers: dict[str, Any]):
    """Factory building a config from the full answers plus overrides.

    Usage::

        def test_something(make_config):
            config = make_config(use_mongodb=False)
    """

    def factory(**overrides: Any) -> ScaffoldConfig:
        return validate_answers({**full_answers, **overrides})

    return factory


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def renderer() -> TemplateRenderer:
    """Template renderer over the packaged templates."""
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# In-memory file system
# ---------------------------------------------------------------------------

class MemoryFileSystem:
    """In-memory stand-in for ``LocalFileSystem`` that records every call."""

    def __init__(self, existing: set[Path] | None = None, fail_on: str | None = None) -> None:
        self.dirs: set[Path] = set(existing or ())
        self.files: dict[Path, str] = {}
        self.calls: list[tuple[str, Path]] = []
        self.fail_on = fail_on

    async def exists(self, path: Path) -> bool:
        self.calls.append(("exists", path))
        return path in self.dirs or path in self.files

    async def ensure_dir(self, path: Path) -> Path:
        self.calls.append(("ensure_dir", path))
        self.dirs.add(path)
        return path

    async def write_file(self, path: Path, content: str) -> Path:
        self.calls.append(("write_file", path))
        if self.fail_on is not None and path.name == self.fail_on:
            raise PermissionError(13, "Permission denied", str(path))
        self.files[path] = content
        return path


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    return MemoryFileSystem()


@pytest.fixture
def memory_fs_factory():
    """The ``MemoryFileSystem`` class, for tests that need pre-existing paths or failures."""
    return MemoryFileSystem
