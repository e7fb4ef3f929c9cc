"""Interactive question flow.

Asks the fixed, ordered set of configuration questions with Rich prompts and
returns the raw answers.  Free-text answers are checked as they are entered
and re-asked until they pass; the final record is still built through
:func:`~express_backend_cli.config.validate_answers`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from .config import (
    API_VERSION_REQUIRED,
    DEFAULT_API_VERSION,
    DEFAULT_PORT,
    SERVICE_NAME_REQUIRED,
    validate_port,
    validate_project_name,
    validate_required,
)
from .errors import ValidationError
from .utils import console as default_console


def _ask_until_valid(
    question: str,
    check: Callable[[str], Any],
    console: Console,
    default: str | None = None,
) -> Any:
    """Repeat *question* until *check* accepts the answer; return its result."""
    while True:
        if default is None:
            answer = Prompt.ask(question, console=console)
        else:
            answer = Prompt.ask(question, default=default, console=console)
        try:
            return check(answer)
        except ValidationError as exc:
            console.print(f"[red]{escape(exc.message)}[/red]")


def ask_project_name(console: Console | None = None) -> str:
    """Ask for the project name when it was not given on the command line."""
    console = console or default_console
    return _ask_until_valid("What is your project name?", validate_project_name, console)


def ask_configuration(project_name: str, console: Console | None = None) -> dict[str, Any]:
    """Ask every configuration question for *project_name*.

    The Morgan question is only asked when the logger was accepted; otherwise
    it is recorded as declined.

    Returns:
        Raw answers keyed by ``ScaffoldConfig`` field name.
    """
    console = console or default_console

    def confirm(question: str) -> bool:
        return Confirm.ask(question, default=True, console=console)

    answers: dict[str, Any] = {"project_name": project_name}
    answers["use_mongodb"] = confirm("Do you want to use MongoDB?")
    answers["use_logger"] = confirm("Do you want to use Winston logger? (Recommended)")
    answers["use_morgan_logging"] = answers["use_logger"] and confirm(
        "Do you want to use Morgan HTTP request logging? (Recommended)"
    )
    answers["use_error_handler"] = confirm(
        "Do you want to include error handling middleware? (Recommended)"
    )
    answers["use_cors"] = confirm("Do you want to enable CORS? (Recommended)")
    answers["service_name"] = _ask_until_valid(
        "What is your service name? (used in logs)",
        lambda value: validate_required("service_name", value, SERVICE_NAME_REQUIRED),
        console,
        default=project_name,
    )
    answers["default_port"] = _ask_until_valid(
        "What default port should the server use?",
        validate_port,
        console,
        default=str(DEFAULT_PORT),
    )
    answers["api_version"] = _ask_until_valid(
        "What API version do you want to use?",
        lambda value: validate_required("api_version", value, API_VERSION_REQUIRED),
        console,
        default=DEFAULT_API_VERSION,
    )
    answers["create_gitignore"] = confirm("Do you want to create a .gitignore file?")
    answers["create_readme"] = confirm("Do you want to create a README.md file?")
    return answers
