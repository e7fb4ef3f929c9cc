"""Tests for project composition and the write-out generator.

Covers:
- compose_project artifact sets per configuration
- Determinism of composition
- Preflight refusal when the project directory exists
- Skeleton created before any file is written
- Write failures surfaced as WriteError
- LocalFileSystem against a real temporary directory
"""

from __future__ import annotations

from pathlib import Path

import pytest

from express_backend_cli.errors import AlreadyExistsError, WriteError
from express_backend_cli.scaffolder import (
    DIRECTORY_SKELETON,
    LocalFileSystem,
    ProjectGenerator,
    compose_project,
)


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit


DEMO_FILES = [
    "package.json",
    "server.js",
    "template/response.js",
    "controller/test.js",
    "routes/test.js",
    ".env.example",
    "eslint.config.js",
]

FULL_FILES = [
    "package.json",
    "server.js",
    "config/db.js",
    "config/logger.js",
    "config/morgan.js",
    "middleware/error-handler.js",
    "template/response.js",
    "controller/test.js",
    "routes/test.js",
    ".gitignore",
    "README.md",
    ".env.example",
    "eslint.config.js",
]


# ---------------------------------------------------------------------------
# compose_project
# ---------------------------------------------------------------------------


class TestComposeProject:
    def test_demo_config_yields_seven_files(self, demo_config, renderer):
        paths = [artifact.path for artifact in compose_project(demo_config, renderer)]
        assert paths == DEMO_FILES

    def test_demo_server_uses_console_start(self, demo_config, renderer):
        server = compose_project(demo_config, renderer)[1]
        assert server.path == "server.js"
        assert "console.log(`Service is running on port: ${PORT}`);" in server.content
        assert "connectDB" not in server.content

    def test_full_config_yields_every_file(self, full_config, renderer):
        paths = [artifact.path for artifact in compose_project(full_config, renderer)]
        assert paths == FULL_FILES

    def test_morgan_without_logger_skipped(self, make_config, renderer):
        config = make_config(use_logger=False, use_morgan_logging=True)
        paths = {artifact.path for artifact in compose_project(config, renderer)}
        assert "config/morgan.js" not in paths
        assert "config/logger.js" not in paths
        assert "config/db.js" in paths

    def test_paths_unique(self, full_config, renderer):
        paths = [artifact.path for artifact in compose_project(full_config, renderer)]
        assert len(paths) == len(set(paths))

    def test_deterministic(self, full_config, renderer):
        assert compose_project(full_config, renderer) == compose_project(full_config, renderer)

    def test_default_renderer(self, demo_config, renderer):
        assert compose_project(demo_config) == compose_project(demo_config, renderer)


# ---------------------------------------------------------------------------
# ProjectGenerator
# ---------------------------------------------------------------------------


class TestProjectGenerator:
    async def test_returns_project_root(self, demo_config, renderer, memory_fs):
        generator = ProjectGenerator(demo_config, renderer, fs=memory_fs)
        root = await generator.generate(Path("/out"))
        assert root == Path("/out/demo")

    async def test_writes_every_artifact(self, full_config, renderer, memory_fs):
        generator = ProjectGenerator(full_config, renderer, fs=memory_fs)
        root = await generator.generate("/out")
        expected = {root.joinpath(*path.split("/")) for path in FULL_FILES}
        assert set(memory_fs.files) == expected
        for artifact in compose_project(full_config, renderer):
            assert memory_fs.files[root.joinpath(*artifact.path.split("/"))] == artifact.content

    async def test_creates_skeleton(self, demo_config, renderer, memory_fs):
        root = await ProjectGenerator(demo_config, renderer, fs=memory_fs).generate("/out")
        assert {root / d for d in DIRECTORY_SKELETON} <= memory_fs.dirs
        assert root in memory_fs.dirs

    async def test_skeleton_created_even_when_empty(self, demo_config, renderer, memory_fs):
        root = await ProjectGenerator(demo_config, renderer, fs=memory_fs).generate("/out")
        # demo writes nothing to config/ or middleware/
        assert root / "config" in memory_fs.dirs
        assert root / "middleware" in memory_fs.dirs
        assert not any(path.parent == root / "config" for path in memory_fs.files)

    async def test_skeleton_before_files(self, full_config, renderer, memory_fs):
        await ProjectGenerator(full_config, renderer, fs=memory_fs).generate("/out")
        kinds = [kind for kind, _ in memory_fs.calls]
        assert kinds[0] == "exists"
        last_dir = max(i for i, kind in enumerate(kinds) if kind == "ensure_dir")
        first_file = kinds.index("write_file")
        assert last_dir < first_file

    async def test_existing_directory_refused(self, demo_config, renderer, memory_fs_factory):
        fs = memory_fs_factory(existing={Path("/out/demo")})
        generator = ProjectGenerator(demo_config, renderer, fs=fs)
        with pytest.raises(AlreadyExistsError) as exc_info:
            await generator.generate("/out")
        assert str(exc_info.value) == 'Directory "demo" already exists!'
        assert [kind for kind, _ in fs.calls] == ["exists"]
        assert fs.files == {}

    async def test_write_failure_raises_write_error(
        self, full_config, renderer, memory_fs_factory
    ):
        fs = memory_fs_factory(fail_on="logger.js")
        generator = ProjectGenerator(full_config, renderer, fs=fs)
        with pytest.raises(WriteError) as exc_info:
            await generator.generate("/out")
        assert "logger.js" in str(exc_info.value)
        assert "Permission denied" in str(exc_info.value)

    async def test_write_failure_keeps_earlier_files(
        self, full_config, renderer, memory_fs_factory
    ):
        fs = memory_fs_factory(fail_on="logger.js")
        with pytest.raises(WriteError):
            await ProjectGenerator(full_config, renderer, fs=fs).generate("/out")
        written = {path.name for path in fs.files}
        assert written == {"package.json", "server.js", "db.js"}


# ---------------------------------------------------------------------------
# LocalFileSystem
# ---------------------------------------------------------------------------


class TestLocalFileSystem:
    async def test_exists(self, tmp_path):
        fs = LocalFileSystem()
        assert await fs.exists(tmp_path) is True
        assert await fs.exists(tmp_path / "missing") is False

    async def test_ensure_dir_creates_parents(self, tmp_path):
        target = tmp_path / "a" / "b"
        assert await LocalFileSystem().ensure_dir(target) == target
        assert target.is_dir()
        await LocalFileSystem().ensure_dir(target)

    async def test_write_file_utf8(self, tmp_path):
        target = tmp_path / "nested" / "README.md"
        await LocalFileSystem().write_file(target, "- ✅ done\n")
        assert target.read_text(encoding="utf-8") == "- ✅ done\n"

    async def test_generate_on_disk(self, demo_config, renderer, tmp_path):
        root = await ProjectGenerator(demo_config, renderer).generate(tmp_path)
        assert sorted(
            p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()
        ) == sorted(DEMO_FILES)
        assert all((root / d).is_dir() for d in DIRECTORY_SKELETON)

    async def test_existing_directory_untouched(self, demo_config, renderer, tmp_path):
        (tmp_path / "demo").mkdir()
        (tmp_path / "demo" / "keep.txt").write_text("mine", encoding="utf-8")
        with pytest.raises(AlreadyExistsError):
            await ProjectGenerator(demo_config, renderer).generate(tmp_path)
        assert [p.name for p in (tmp_path / "demo").iterdir()] == ["keep.txt"]
