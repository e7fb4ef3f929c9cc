"""Per-file generators for the Express project skeleton.

Each generator is a pure function of the scaffold configuration and returns
an :class:`Artifact`, or ``None`` when the feature it belongs to is disabled.
The server entry file is composed separately in :mod:`.server`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from ..config import ScaffoldConfig
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Fixed values shared by several generated files
# ---------------------------------------------------------------------------

PACKAGE_DESCRIPTION = "Node.js Express API generated with express-backend-cli"
TEST_GREETING = "Hello World! Your API is working correctly."
EXAMPLE_DATABASE_URL = "mongodb://localhost:27017/your-database-name"
MORGAN_FORMAT = ":method :url :status :res[content-length] - :response-time ms"

BASE_DEPENDENCIES: dict[str, str] = {
    "express": "^4.18.2",
    "dotenv": "^16.3.1",
}
DEV_DEPENDENCIES: dict[str, str] = {
    "nodemon": "^3.0.1",
}
MONGOOSE_VERSION = "^7.5.0"
WINSTON_VERSION = "^3.10.0"
MORGAN_VERSION = "^1.10.0"
CORS_VERSION = "^2.8.5"


@dataclass(frozen=True)
class Artifact:
    """One generated file: a POSIX path relative to the project root and its text."""

    path: str
    content: str


# ---------------------------------------------------------------------------
# Template context
# ---------------------------------------------------------------------------


def route_namespace(config: ScaffoldConfig) -> str:
    """Mount point of the test router, e.g. ``/api/v1/test``."""
    return f"/api/{config.api_version}/test"


def build_context(config: ScaffoldConfig) -> dict[str, Any]:
    """Build the Jinja2 template context from the scaffold config."""
    return {
        "config": config,
        "morgan_enabled": config.morgan_enabled,
        "namespace": route_namespace(config),
        "greeting": TEST_GREETING,
        "database_url": EXAMPLE_DATABASE_URL,
        "morgan_format": MORGAN_FORMAT,
        "config_files": _config_file_entries(config),
    }


def _config_file_entries(config: ScaffoldConfig) -> list[str]:
    """README project-structure lines for the files under ``config/``."""
    entries: list[tuple[str, str]] = []
    if config.use_mongodb:
        entries.append(("db.js", "Database connection"))
    if config.use_logger:
        entries.append(("logger.js", "Winston logger configuration"))
    if config.morgan_enabled:
        entries.append(("morgan.js", "Morgan HTTP logging"))
    return [f"{name:<13}# {comment}" for name, comment in entries]


def _render(
    renderer: TemplateRenderer, template_path: str, config: ScaffoldConfig
) -> str:
    return renderer.render(template_path, build_context(config))


# ---------------------------------------------------------------------------
# Package manifest
# ---------------------------------------------------------------------------


def package_dependencies(config: ScaffoldConfig) -> dict[str, str]:
    """Runtime dependencies declared in ``package.json``."""
    dependencies = dict(BASE_DEPENDENCIES)
    if config.use_mongodb:
        dependencies["mongoose"] = MONGOOSE_VERSION
    if config.use_logger:
        dependencies["winston"] = WINSTON_VERSION
    if config.morgan_enabled:
        dependencies["morgan"] = MORGAN_VERSION
    if config.use_cors:
        dependencies["cors"] = CORS_VERSION
    return dependencies


def package_json(config: ScaffoldConfig) -> Artifact:
    """Generate ``package.json`` with two-space indentation."""
    manifest = {
        "name": config.project_name,
        "version": "1.0.0",
        "description": PACKAGE_DESCRIPTION,
        "main": "server.js",
        "type": "module",
        "scripts": {
            "start": "node server.js",
            "dev": "nodemon server.js",
            "test": 'echo "Error: no test specified" && exit 1',
        },
        "keywords": ["nodejs", "express", "api"],
        "author": "",
        "license": "ISC",
        "dependencies": package_dependencies(config),
        "devDependencies": dict(DEV_DEPENDENCIES),
    }
    return Artifact("package.json", json.dumps(manifest, indent=2) + "\n")


# ---------------------------------------------------------------------------
# config/
# ---------------------------------------------------------------------------


def db_config(config: ScaffoldConfig, renderer: TemplateRenderer) -> Artifact | None:
    """``config/db.js``: the ``connectDB`` helper (MongoDB only)."""
    if not config.use_mongodb:
        return None
    return Artifact("config/db.js", _render(renderer, "config/db.js.j2", config))


def logger_config(config: ScaffoldConfig, renderer: TemplateRenderer) -> Artifact | None:
    """``config/logger.js``: Winston logger with the service name baked in."""
    if not config.use_logger:
        return None
    return Artifact("config/logger.js", _render(renderer, "config/logger.js.j2", config))


def morgan_config(config: ScaffoldConfig, renderer: TemplateRenderer) -> Artifact | None:
    """``config/morgan.js``: HTTP request logging streamed into the logger.

    Never produced without the logger, whatever ``use_morgan_logging`` says.
    """
    if not config.morgan_enabled:
        return None
    return Artifact("config/morgan.js", _render(renderer, "config/morgan.js.j2", config))


# ---------------------------------------------------------------------------
# middleware/, template/, controller/, routes/
# ---------------------------------------------------------------------------


def error_handler(config: ScaffoldConfig, renderer: TemplateRenderer) -> Artifact | None:
    """``middleware/error-handler.js``: ``errorHandler`` and ``asyncHandler``."""
    if not config.use_error_handler:
        return None
    return Artifact(
        "middleware/error-handler.js",
        _render(renderer, "middleware/error-handler.js.j2", config),
    )


def response_template(config: ScaffoldConfig, renderer: TemplateRenderer) -> Artifact:
    """``template/response.js``: the JSON envelope every route responds with."""
    return Artifact(
        "template/response.js", _render(renderer, "template/response.js.j2", config)
    )


def sample_controller(config: ScaffoldConfig, renderer: TemplateRenderer) -> Artifact:
    return Artifact(
        "controller/test.js", _render(renderer, "controller/test.js.j2", config)
    )


def sample_routes(config: ScaffoldConfig, renderer: TemplateRenderer) -> Artifact:
    return Artifact("routes/test.js", _render(renderer, "routes/test.js.j2", config))


# ---------------------------------------------------------------------------
# Documentation, environment, ignore and lint files
# ---------------------------------------------------------------------------


def readme(config: ScaffoldConfig, renderer: TemplateRenderer) -> Artifact | None:
    if not config.create_readme:
        return None
    return Artifact("README.md", _render(renderer, "README.md.j2", config))


def gitignore(config: ScaffoldConfig, renderer: TemplateRenderer) -> Artifact | None:
    if not config.create_gitignore:
        return None
    return Artifact(".gitignore", _render(renderer, "gitignore.j2", config))


def env_example(config: ScaffoldConfig, renderer: TemplateRenderer) -> Artifact:
    """``.env.example``: ``PORT`` and ``BASE_URL``, plus ``DATABASE_URL`` with MongoDB."""
    return Artifact(".env.example", _render(renderer, "env.example.j2", config))


def eslint_config(config: ScaffoldConfig, renderer: TemplateRenderer) -> Artifact:
    return Artifact("eslint.config.js", _render(renderer, "eslint.config.js.j2", config))
