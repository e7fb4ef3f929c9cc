"""Express API scaffolder -- renders and writes the project skeleton.

This module takes a validated ``ScaffoldConfig`` and renders a minimal
Node.js / Express API project: ``package.json``, ``server.js``, config
modules, middleware, the sample route and controller, and documentation.

Quick usage::

    from express_backend_cli.config import validate_answers
    from express_backend_cli.scaffolder import ProjectGenerator

    config = validate_answers({"project_name": "my-api", "use_mongodb": False})
    generator = ProjectGenerator(config)
    project_path = await generator.generate("/tmp/output")
"""

from express_backend_cli.scaffolder.artifacts import Artifact
from express_backend_cli.scaffolder.filesystem import FileSystem, LocalFileSystem
from express_backend_cli.scaffolder.generator import (
    DIRECTORY_SKELETON,
    ProjectGenerator,
    compose_project,
)
from express_backend_cli.scaffolder.templates import TemplateRenderer

__all__ = [
    "Artifact",
    "DIRECTORY_SKELETON",
    "FileSystem",
    "LocalFileSystem",
    "ProjectGenerator",
    "TemplateRenderer",
    "compose_project",
]
