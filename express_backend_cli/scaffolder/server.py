"""Composition of the generated ``server.js`` entry file.

The file is assembled from five fragments, always joined in the same order:

1. imports
2. middleware setup (app instance, body parsing, cors, morgan, PORT/BASE_URL)
3. route mounting and the 404 catch-all
4. error handling (only with the error handler, and always the last middleware)
5. server start

The server-start fragment is one of four variants picked from
:data:`SERVER_START_VARIANTS` by the ``(use_mongodb, use_logger)`` pair.
"""

from __future__ import annotations

from ..config import ScaffoldConfig
from .artifacts import Artifact, build_context
from .templates import TemplateRenderer


# (use_mongodb, use_logger) -> start template
SERVER_START_VARIANTS: dict[tuple[bool, bool], str] = {
    (True, True): "server/start_logger_db.js.j2",
    (True, False): "server/start_console_db.js.j2",
    (False, True): "server/start_logger.js.j2",
    (False, False): "server/start_console.js.j2",
}


def imports_fragment(config: ScaffoldConfig, renderer: TemplateRenderer) -> str:
    return renderer.render("server/imports.js.j2", build_context(config))


def middleware_fragment(config: ScaffoldConfig, renderer: TemplateRenderer) -> str:
    return renderer.render("server/middleware.js.j2", build_context(config))


def routes_fragment(config: ScaffoldConfig, renderer: TemplateRenderer) -> str:
    return renderer.render("server/routes.js.j2", build_context(config))


def error_handling_fragment(config: ScaffoldConfig, renderer: TemplateRenderer) -> str:
    """Register ``errorHandler``; empty when the error handler is disabled."""
    if not config.use_error_handler:
        return ""
    return renderer.render("server/error_handling.js.j2", build_context(config))


def server_start_template(config: ScaffoldConfig) -> str:
    """Return the start template for the ``(use_mongodb, use_logger)`` pair."""
    return SERVER_START_VARIANTS[(config.use_mongodb, config.use_logger)]


def server_start_fragment(config: ScaffoldConfig, renderer: TemplateRenderer) -> str:
    return renderer.render(server_start_template(config), build_context(config))


def server_js(config: ScaffoldConfig, renderer: TemplateRenderer) -> Artifact:
    """Compose ``server.js``, separating fragments with one blank line."""
    fragments = (
        imports_fragment(config, renderer),
        middleware_fragment(config, renderer),
        routes_fragment(config, renderer),
        error_handling_fragment(config, renderer),
        server_start_fragment(config, renderer),
    )
    return Artifact("server.js", "\n".join(f for f in fragments if f))
