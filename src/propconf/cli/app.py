"""Root CLI application."""

from __future__ import annotations

import typer

from propconf.cli.defaults import defaults_app
from propconf.cli.get import get_app

app = typer.Typer(
    name="propconf",
    help="Resolve layered settings and inspect declared defaults.",
    no_args_is_help=True,
)

app.add_typer(get_app, name="get", help="Resolve a setting from properties and the environment")
app.add_typer(defaults_app, name="defaults", help="Inspect defaults declared on a class")


def main() -> None:
    from propconf.config.loader import get_config
    from propconf.utils.logging import setup_logging

    config = get_config()
    setup_logging(config.log_level, config.json_logs)
    app()
