"""CLI commands resolving a single setting."""

from __future__ import annotations

from typing import Any, Optional

import typer
from typing_extensions import Annotated

from propconf.cli.defaults import load_owner

get_app = typer.Typer(no_args_is_help=True)

NameArg = Annotated[str, typer.Argument(help="Setting name, e.g. db.port or db_port")]
PrefixOpt = Annotated[
    Optional[str], typer.Option("--prefix", "-p", help="Prefix, overrides PROPCONF_PREFIX")
]
SetOpt = Annotated[
    Optional[list[str]], typer.Option("--set", "-s", help="KEY=VALUE property, repeatable")
]
OwnerOpt = Annotated[
    Optional[str], typer.Option("--owner", "-o", help="Class declaring defaults, module:Class")
]
NoEnvOpt = Annotated[bool, typer.Option("--no-env", help="Ignore environment variables")]
ShowSensitiveOpt = Annotated[
    bool, typer.Option("--show-sensitive", help="Log sensitive values in full")
]


def _parse_assignments(assignments: list[str] | None) -> dict[str, str]:
    properties: dict[str, str] = {}
    for item in assignments or []:
        key, sep, value = item.partition("=")
        if not sep or not key:
            typer.echo(f"Error: expected KEY=VALUE, got '{item}'", err=True)
            raise typer.Exit(1)
        properties[key] = value
    return properties


def _resolve(
    accessor: str,
    name: str,
    default: Any,
    owner: str | None,
    prefix: str | None,
    assignments: list[str] | None,
    no_env: bool,
    show_sensitive: bool,
) -> None:
    from propconf.config.loader import get_config
    from propconf.errors import SettingsError
    from propconf.resolver.settings import Settings

    config = get_config()
    settings = Settings(
        _parse_assignments(assignments),
        prefix=config.prefix if prefix is None else prefix,
        wrap_in_environment=config.wrap_in_environment and not no_env,
        log_sensitive_data=show_sensitive or config.log_sensitive_data,
    )
    fallback = load_owner(owner) if owner else default

    try:
        if fallback is None:
            value = getattr(settings, accessor)(name)
        else:
            value = getattr(settings, accessor)(name, fallback)
    except SettingsError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if isinstance(value, bool):
        value = "true" if value else "false"
    typer.echo(value)


@get_app.command("string")
def get_string(
    name: NameArg,
    default: Annotated[Optional[str], typer.Option("--default", "-d")] = None,
    sensitive: Annotated[
        bool, typer.Option("--sensitive", help="Hide the value from the log")
    ] = False,
    owner: OwnerOpt = None,
    prefix: PrefixOpt = None,
    assignments: SetOpt = None,
    no_env: NoEnvOpt = False,
    show_sensitive: ShowSensitiveOpt = False,
) -> None:
    """Resolve a string setting."""
    accessor = "get_sensitive" if sensitive and owner is None else "get"
    _resolve(accessor, name, default, owner, prefix, assignments, no_env, show_sensitive)


@get_app.command("int")
def get_int(
    name: NameArg,
    default: Annotated[Optional[int], typer.Option("--default", "-d")] = None,
    owner: OwnerOpt = None,
    prefix: PrefixOpt = None,
    assignments: SetOpt = None,
    no_env: NoEnvOpt = False,
    show_sensitive: ShowSensitiveOpt = False,
) -> None:
    """Resolve a 32-bit integer setting."""
    _resolve("get_int", name, default, owner, prefix, assignments, no_env, show_sensitive)


@get_app.command("long")
def get_long(
    name: NameArg,
    default: Annotated[Optional[int], typer.Option("--default", "-d")] = None,
    owner: OwnerOpt = None,
    prefix: PrefixOpt = None,
    assignments: SetOpt = None,
    no_env: NoEnvOpt = False,
    show_sensitive: ShowSensitiveOpt = False,
) -> None:
    """Resolve a 64-bit integer setting."""
    _resolve("get_long", name, default, owner, prefix, assignments, no_env, show_sensitive)


@get_app.command("double")
def get_double(
    name: NameArg,
    default: Annotated[Optional[float], typer.Option("--default", "-d")] = None,
    owner: OwnerOpt = None,
    prefix: PrefixOpt = None,
    assignments: SetOpt = None,
    no_env: NoEnvOpt = False,
    show_sensitive: ShowSensitiveOpt = False,
) -> None:
    """Resolve a floating point setting."""
    _resolve("get_double", name, default, owner, prefix, assignments, no_env, show_sensitive)


@get_app.command("boolean")
def get_boolean(
    name: NameArg,
    default: Annotated[Optional[bool], typer.Option("--default/--no-default", "-d/-D")] = None,
    owner: OwnerOpt = None,
    prefix: PrefixOpt = None,
    assignments: SetOpt = None,
    no_env: NoEnvOpt = False,
    show_sensitive: ShowSensitiveOpt = False,
) -> None:
    """Resolve a boolean setting ("true" in any case reads as true)."""
    _resolve("get_boolean", name, default, owner, prefix, assignments, no_env, show_sensitive)
