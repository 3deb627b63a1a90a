"""
cli.py

PURPOSE: Developer command-line interface for inspecting wire payloads.
DEPENDENCIES: typer, rich

ARCHITECTURE NOTES:
The CLI provides commands for:
- validate: Check a JSON payload file against a registered blueprint
- format: Instantiate a payload and print its canonical JSON form
- types: List the registered blueprints and their schemas
- config: Show the effective settings
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from gamewire import __version__
from gamewire.config import configure_logging, get_settings
from gamewire.models import BLUEPRINTS
from gamewire.schema import SchemaError, schema_of, to_class, to_string, validate
from gamewire.ui import plain

app = typer.Typer(
    name="gamewire",
    help="Validate and format multiplayer game wire payloads.",
    add_completion=False,
)

console = Console()

PayloadFile = Annotated[
    Path,
    typer.Argument(
        help="Path to the JSON payload file",
        exists=True,
        readable=True,
        dir_okay=False,
    ),
]

TypeName = Annotated[
    str,
    typer.Option(
        "--type",
        "-t",
        help="Blueprint to check against (see `gamewire types`)",
    ),
]

Revalidate = Annotated[
    bool,
    typer.Option(
        "--revalidate",
        help="Also type-check values that are already typed instances",
    ),
]


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"gamewire version {__version__}")
        raise typer.Exit()


def _blueprint(name: str) -> type:
    blueprint = BLUEPRINTS.get(name)
    if blueprint is None:
        plain.print_error(f"Unknown blueprint '{name}'. Known: {', '.join(sorted(BLUEPRINTS))}")
        raise typer.Exit(1)
    return blueprint


@app.callback()
def main(
    _version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """gamewire - schema validation and typed serialization for game payloads."""
    configure_logging(get_settings())


@app.command("validate")
def validate_cmd(
    payload_file: PayloadFile,
    type_name: TypeName,
    revalidate: Revalidate = False,
) -> None:
    """Validate a JSON payload file."""
    settings = get_settings()
    blueprint = _blueprint(type_name)

    error = validate(
        payload_file.read_text(encoding="utf-8"),
        blueprint,
        revalidate=revalidate or settings.revalidate,
    )
    if error is not None:
        plain.print_error(f"Invalid {type_name}:")
        plain.print_error(f"  {error}")
        raise typer.Exit(1)

    plain.print_success(f"Valid {type_name}")


@app.command("format")
def format_cmd(
    payload_file: PayloadFile,
    type_name: TypeName,
    indent: Annotated[
        int | None,
        typer.Option(
            "--indent",
            "-i",
            min=0,
            help="Indent output (default: canonical compact form)",
        ),
    ] = None,
    revalidate: Revalidate = False,
) -> None:
    """Print the canonical JSON form of a payload file."""
    settings = get_settings()
    blueprint = _blueprint(type_name)

    instance = to_class(
        payload_file.read_text(encoding="utf-8"),
        blueprint,
        revalidate=revalidate or settings.revalidate,
    )
    if isinstance(instance, SchemaError):
        plain.print_error(f"Invalid {type_name}:")
        plain.print_error(f"  {instance}")
        raise typer.Exit(1)

    text = to_string(instance, indent=indent if indent is not None else settings.indent)
    if isinstance(text, SchemaError):
        plain.print_error(f"Cannot serialize {type_name}: {text}")
        raise typer.Exit(1)

    plain.print_document(text)


@app.command()
def types() -> None:
    """List registered blueprints and their fields."""
    rows = [
        (name, [(field, prop.describe()) for field, prop in schema_of(cls).items()])
        for name, cls in sorted(BLUEPRINTS.items())
    ]
    plain.print_blueprints(rows)


@app.command("config")
def config_cmd() -> None:
    """Show current configuration."""
    settings = get_settings()
    console.print("[bold]Current Configuration:[/bold]")
    console.print(f"  Log level: {settings.log_level}")
    console.print(f"  Debug: {settings.debug}")
    console.print(f"  Revalidate typed values: {settings.revalidate}")
    indent_status = settings.indent if settings.indent is not None else "(canonical compact)"
    console.print(f"  Indent: {indent_status}")


if __name__ == "__main__":
    app()
