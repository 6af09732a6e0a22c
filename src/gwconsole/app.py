"""Root Typer app — global options and command registration."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from gwconsole import __version__
from gwconsole.commands import config_cmd, gateway, session_cmd

app = typer.Typer(
    name="gwconsole",
    help="Console for security gateway objects on a management server.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"gwconsole {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    root = logging.getLogger("gwconsole")
    root.handlers.clear()
    root.addHandler(
        RichHandler(console=Console(stderr=True), show_path=False, show_time=verbose)
    )
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.propagate = False


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log API calls to stderr."),
) -> None:
    """Manage gateway objects: log in, list, inspect, clone, publish."""
    configure_logging(verbose)


app.command()(session_cmd.login)
app.command()(session_cmd.logout)
app.command()(session_cmd.status)
app.add_typer(gateway.app, name="gateway")
app.add_typer(config_cmd.app, name="config")


def main() -> None:
    app()
