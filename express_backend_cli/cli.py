"""Command-line entry point for express-backend-cli.

Usage::

    express-backend-cli                      # ask for everything
    express-backend-cli my-api               # project name given, ask the rest
    express-backend-cli my-api --yes         # accept every default
    express-backend-cli --answers api.json   # non-interactive, answers from JSON
    express-backend-cli my-api --save-answers api.json  # record answers for reuse
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from .config import ScaffoldConfig, load_answers, validate_answers, validate_project_name
from .errors import ScaffoldError, ValidationError
from .prompts import ask_configuration, ask_project_name
from .scaffolder import ProjectGenerator
from .utils import (
    console,
    print_banner,
    print_error,
    print_next_steps,
    print_success,
    print_summary_table,
    print_warning,
)

PROG = "express-backend-cli"


# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Generate a Node.js Express API template with customizable features",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            f"  {PROG}\n"
            f"  {PROG} my-api\n"
            f"  {PROG} my-api --yes -o ./projects\n"
            f"  {PROG} --answers answers.json\n"
            f"  {PROG} my-api --save-answers answers.json\n"
        ),
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        default=None,
        help="Name of the project (asked interactively if omitted)",
    )
    parser.add_argument(
        "--output", "-o",
        default=".",
        help="Directory the project folder is created in (default: current directory)",
    )
    parser.add_argument(
        "--answers",
        type=Path,
        default=None,
        help="JSON file of answers (omitted ones take their defaults); skips the questions",
    )
    parser.add_argument(
        "--save-answers",
        type=Path,
        default=None,
        help="Write the final answers to this JSON file for later --answers runs",
    )
    parser.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Accept the default answer for every question",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every directory and file as it is written",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    return parser


def setup_logging(verbose: bool = False) -> None:
    """Route the package's log records to stderr through Rich."""
    package_logger = logging.getLogger("express_backend_cli")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.addHandler(
        RichHandler(console=Console(stderr=True), show_path=False, markup=False)
    )


def _version() -> str:
    from . import __version__

    return __version__


# ---------------------------------------------------------------------------
# Configuration collection
# ---------------------------------------------------------------------------


def collect_configuration(args: argparse.Namespace) -> ScaffoldConfig:
    """Build the scaffold configuration from an answers file, defaults or prompts.

    Raises:
        ValidationError: If any answer is invalid.
        OSError: If the answers file cannot be read.
    """
    if args.answers is not None:
        if not args.project_name:
            return ScaffoldConfig.load(args.answers)
        # service_name still defaults to the final project name
        answers = load_answers(args.answers)
        answers["project_name"] = args.project_name
        return validate_answers(answers)

    if args.yes:
        if not args.project_name:
            raise ValidationError("project_name", "a project name is required with --yes")
        return validate_answers({"project_name": args.project_name})

    if args.project_name:
        project_name = validate_project_name(args.project_name)
    else:
        project_name = ask_project_name(console)
    return validate_answers(ask_configuration(project_name, console))


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def report_success(config: ScaffoldConfig, project_path: Path) -> None:
    print_success(f'\n✅ Project "{config.project_name}" created successfully!\n')
    print_summary_table(
        {
            "Location": str(project_path),
            "MongoDB": _yes_no(config.use_mongodb),
            "Winston logger": _yes_no(config.use_logger),
            "Morgan HTTP logging": _yes_no(config.morgan_enabled),
            "Error handler": _yes_no(config.use_error_handler),
            "CORS": _yes_no(config.use_cors),
            "Service name": config.service_name,
            "Default port": str(config.default_port),
            "API namespace": f"/api/{config.api_version}",
        },
        title="Configuration",
    )
    print_next_steps([
        f"cd {config.project_name}",
        "npm install",
        "Create a .env file use the reference of `.env.example` (important!)",
        "npm start",
    ])
    console.print("[blue]Happy coding! 🎉[/blue]")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``express-backend-cli`` and ``python -m express_backend_cli``."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    print_banner()
    try:
        config = collect_configuration(args)
        if args.save_answers is not None:
            config.save(args.save_answers)
        generator = ProjectGenerator(config)
        project_path = asyncio.run(generator.generate(args.output))
    except ScaffoldError as exc:
        print_error(f"\n❌ Error creating project: {exc}")
        sys.exit(1)
    except OSError as exc:
        print_error(f"\n❌ Error accessing answers file: {exc}")
        sys.exit(1)
    except KeyboardInterrupt:
        print_warning("\nAborted.")
        sys.exit(1)

    report_success(config, project_path)


if __name__ == "__main__":
    main()
