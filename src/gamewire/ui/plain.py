"""
plain.py

PURPOSE: Console output formatting for the CLI.
DEPENDENCIES: rich

ARCHITECTURE NOTES:
Status messages, errors and tables go through Rich. JSON documents are
written verbatim (no highlighting or wrapping) so the output of
`gamewire format` can be piped and compared byte for byte.
"""

from collections.abc import Iterable

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

# Global console instance
console = Console()


def print_error(text: str) -> None:
    """Print an error message."""
    console.print(f"[red]{escape(text)}[/red]", highlight=False)


def print_success(text: str) -> None:
    """Print a success message."""
    console.print(f"[green]{escape(text)}[/green]", highlight=False)


def print_document(text: str) -> None:
    """Print a JSON document exactly as given."""
    typer.echo(text)


def print_blueprints(rows: Iterable[tuple[str, Iterable[tuple[str, str]]]]) -> None:
    """Print a table of blueprint names and their fields."""
    table = Table(title="Blueprints")
    table.add_column("Name", style="bold cyan")
    table.add_column("Fields")
    for name, fields in rows:
        table.add_row(name, "\n".join(f"{field}: {kind}" for field, kind in fields))
    console.print(table)
