"""CLI commands for inspecting declared defaults."""

from __future__ import annotations

import importlib

import typer
from rich.console import Console
from rich.table import Table
from typing_extensions import Annotated

defaults_app = typer.Typer(no_args_is_help=True)
console = Console()


def load_owner(path: str) -> type:
    """Import the class named by ``module:Class``."""
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise typer.BadParameter(f"Expected module:Class, got '{path}'")
    try:
        owner = getattr(importlib.import_module(module_name), attr)
    except (ImportError, AttributeError) as e:
        raise typer.BadParameter(f"Cannot load {path}: {e}") from e
    if not isinstance(owner, type):
        raise typer.BadParameter(f"{path} is not a class")
    return owner


@defaults_app.command("list")
def defaults_list(
    owner: Annotated[str, typer.Argument(help="Declaring class as module:Class")],
    show_sensitive: Annotated[
        bool, typer.Option("--show-sensitive", help="Print sensitive defaults in full")
    ] = False,
) -> None:
    """Show every key a class declares, with its kind and default."""
    from propconf.defaults import registry
    from propconf.utils.logging import HIDDEN_VALUE

    cls = load_owner(owner)
    entries = registry.declared(cls)
    if not entries:
        typer.echo(f"No settings declared on {cls.__qualname__}")
        return

    table = Table(title=f"Defaults for {cls.__qualname__}", show_header=True, header_style="bold")
    table.add_column("Key")
    table.add_column("Kind")
    table.add_column("Default")
    table.add_column("Sensitive")

    for key in sorted(entries):
        reg = entries[key]
        if not reg.has_default:
            shown = "-"
        elif reg.sensitive and not show_sensitive:
            shown = HIDDEN_VALUE
        else:
            shown = reg.as_string()
        table.add_row(
            key,
            reg.kind.value if reg.kind else "-",
            shown,
            "yes" if reg.sensitive else "",
        )

    console.print(table)


@defaults_app.command("show")
def defaults_show(
    owner: Annotated[str, typer.Argument(help="Declaring class as module:Class")],
    key: Annotated[str, typer.Argument(help="Setting key")],
) -> None:
    """Print the default one key falls back to."""
    from propconf.defaults import registry
    from propconf.errors import MissingDefaultError

    cls = load_owner(owner)
    try:
        typer.echo(registry.default_for(cls, key))
    except MissingDefaultError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
