"""Shared console helpers for express-backend-cli.

Every user-facing message goes through the single Rich ``console`` defined
here so that tests can capture output in one place.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner() -> None:
    """Print the welcome line shown before the first question."""
    console.print()
    console.print(
        "[bold blue]🚀 Welcome to Node.js Express API Template Generator![/bold blue]"
    )
    console.print()


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_next_steps(steps: list[str]) -> None:
    """Print a numbered list of follow-up commands."""
    console.print("[yellow]Next steps:[/yellow]")
    for number, step in enumerate(steps, start=1):
        console.print(f"  {number}. {step}", markup=False)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
