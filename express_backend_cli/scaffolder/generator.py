"""Main scaffolding orchestrator.

Takes a validated ``ScaffoldConfig`` and produces the Express API project:
:func:`compose_project` renders every file in memory, and
:class:`ProjectGenerator` checks the target directory, creates the fixed
directory skeleton and writes the rendered files through a
:class:`~.filesystem.FileSystem`.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import ScaffoldConfig
from ..errors import AlreadyExistsError, WriteError
from . import artifacts
from .artifacts import Artifact
from .filesystem import FileSystem, LocalFileSystem
from .server import server_js
from .templates import TemplateRenderer

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Directory skeleton
# ---------------------------------------------------------------------------

DIRECTORY_SKELETON: tuple[str, ...] = (
    "config",
    "controller",
    "middleware",
    "routes",
    "template",
)


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


def compose_project(
    config: ScaffoldConfig, renderer: TemplateRenderer | None = None
) -> list[Artifact]:
    """Render every file of the project for *config*.

    Pure: nothing is written, and equal configurations always produce equal
    artifact lists.  Files belonging to disabled features are omitted.

    Args:
        config: The validated scaffold configuration.
        renderer: Template renderer to use.  A fresh one is created when
            omitted.

    Returns:
        Artifacts in generation order.
    """
    renderer = renderer or TemplateRenderer()
    candidates = [
        artifacts.package_json(config),
        server_js(config, renderer),
        artifacts.db_config(config, renderer),
        artifacts.logger_config(config, renderer),
        artifacts.morgan_config(config, renderer),
        artifacts.error_handler(config, renderer),
        artifacts.response_template(config, renderer),
        artifacts.sample_controller(config, renderer),
        artifacts.sample_routes(config, renderer),
        artifacts.gitignore(config, renderer),
        artifacts.readme(config, renderer),
        artifacts.env_example(config, renderer),
        artifacts.eslint_config(config, renderer),
    ]
    return [artifact for artifact in candidates if artifact is not None]


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Writes a composed Express project to disk.

    The run is strictly ordered: the project directory must not exist, the
    directory skeleton is created in full, and only then are files written.
    A failed write aborts the run; files already written stay in place.
    """

    def __init__(
        self,
        config: ScaffoldConfig,
        renderer: TemplateRenderer | None = None,
        fs: FileSystem | None = None,
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()
        self.fs: FileSystem = fs or LocalFileSystem()

    # -- Public API --------------------------------------------------------

    async def generate(self, output_dir: str | Path) -> Path:
        """Generate the project under *output_dir*.

        Args:
            output_dir: Parent directory.  A subdirectory named after the
                project is created inside it.

        Returns:
            Path to the generated project root.

        Raises:
            AlreadyExistsError: If the project directory is already present.
            WriteError: If a directory or file could not be written.
        """
        project_root = Path(output_dir) / self.config.project_name

        # 1. Preflight
        if await self.fs.exists(project_root):
            raise AlreadyExistsError(project_root)

        # 2. Render everything in memory
        rendered = compose_project(self.config, self.renderer)

        # 3. Create the skeleton directory structure
        await self._create_directory_structure(project_root)

        # 4. Persist
        for artifact in rendered:
            await self._write_artifact(project_root, artifact)

        logger.info("Generated %d files in %s", len(rendered), project_root)
        return project_root

    # -- Directory structure -----------------------------------------------

    async def _create_directory_structure(self, root: Path) -> None:
        """Create the project root and every skeleton directory."""
        for directory in (root, *(root / d for d in DIRECTORY_SKELETON)):
            try:
                await self.fs.ensure_dir(directory)
            except OSError as exc:
                raise WriteError(directory, exc.strerror or str(exc)) from exc
            logger.debug("Created directory %s", directory)

    # -- Files -------------------------------------------------------------

    async def _write_artifact(self, root: Path, artifact: Artifact) -> Path:
        target = root.joinpath(*artifact.path.split("/"))
        try:
            await self.fs.write_file(target, artifact.content)
        except OSError as exc:
            raise WriteError(target, exc.strerror or str(exc)) from exc
        logger.debug("Wrote %s (%d bytes)", artifact.path, len(artifact.content))
        return target
