"""Jinja2 template rendering for the generated Express project.

Provides the TemplateRenderer class which loads the packaged Jinja2 templates
from ``express_backend_cli/scaffolder/templates/`` and renders them with a
context built from the scaffold configuration.  Rendering is pure: the
renderer never touches the output directory, it only returns text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    Templates are ``.j2`` files under a configurable template directory and
    are rendered with a context dictionary that typically holds the scaffold
    configuration and a few derived values (route namespace, service name
    literal, etc.).  Undefined variables raise instead of rendering empty.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["js_string"] = _js_string_filter
        self.env.filters["js_comment"] = _js_comment_filter

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"server/imports.js.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

_JS_ESCAPES = str.maketrans({
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
})


def _js_string_filter(value: Any) -> str:
    """Render *value* as a single-quoted JavaScript string literal."""
    return "'" + str(value).translate(_JS_ESCAPES) + "'"


def _js_comment_filter(value: Any) -> str:
    """Make *value* safe inside a ``/* ... */`` block comment."""
    return str(value).replace("*/", "*\\/")
