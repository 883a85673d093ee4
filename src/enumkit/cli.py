"""
enumkit CLI.

Commands for working with enum definition files:
- show: build every enum in a file and print its members
- check: validate a file by building every enum in it
"""

from __future__ import annotations

import json
import logging
import platform
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.table import Table

from enumkit._version import get_version
from enumkit.core.base import BaseEnum
from enumkit.core.definitions import build_enums, load_definitions
from enumkit.core.errors import EnumKitError
from enumkit.core.metadata import Variant

app = typer.Typer(
    help="Build and inspect runtime enums from definition files",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"enumkit {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and environment information",
        ),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """enumkit CLI main callback for global options."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_enums(path: Path, strict: bool | None) -> dict[str, BaseEnum]:
    """Load and build every enum in a definition file, exiting on error."""
    if not path.exists():
        typer.echo(f"No such file: {path}", err=True)
        raise typer.Exit(code=1)

    try:
        return build_enums(load_definitions(path), strict=strict)
    except EnumKitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _display(value: Any) -> Any:
    if isinstance(value, Variant):
        return value.value
    return value


@app.command("show")
def show_command(
    path: Annotated[Path, typer.Argument(help="TOML definition file")],
    enum_name: Annotated[
        str | None, typer.Option("--enum", "-e", help="Only show this enum")
    ] = None,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    strict: Annotated[
        bool | None,
        typer.Option("--strict/--no-strict", help="Override ENUMKIT_STRICT"),
    ] = None,
) -> None:
    """Build the enums in a definition file and print their members."""
    enums = _load_enums(path, strict)
    if enum_name is not None:
        if enum_name not in enums:
            typer.echo(f"No enum named '{enum_name}' in {path}", err=True)
            raise typer.Exit(code=1)
        enums = {enum_name: enums[enum_name]}

    if output_json:
        payload = {
            name: {
                "kind": enum.kind,
                "entries": [[key, _display(value)] for key, value in enum.entries()],
            }
            for name, enum in enums.items()
        }
        console.print_json(json.dumps(payload, default=str))
        return

    if not enums:
        console.print("[dim]No enums defined.[/dim]")
        return

    for name, enum in enums.items():
        table = Table(title=f"{name} ({enum.kind})")
        table.add_column("#", style="dim")
        table.add_column("Key")
        table.add_column("Value")
        for position, (key, value) in enumerate(enum.entries()):
            table.add_row(str(position), key, repr(_display(value)))
        console.print(table)


@app.command("check")
def check_command(
    path: Annotated[Path, typer.Argument(help="TOML definition file")],
    strict: Annotated[
        bool | None,
        typer.Option("--strict/--no-strict", help="Override ENUMKIT_STRICT"),
    ] = None,
) -> None:
    """Validate a definition file by building every enum in it."""
    enums = _load_enums(path, strict)
    members = sum(len(enum) for enum in enums.values())
    console.print(f"[green]ok[/green] {len(enums)} enum(s), {members} member(s)")


def main() -> None:
    app(standalone_mode=True)


if __name__ == "__main__":
    main()
