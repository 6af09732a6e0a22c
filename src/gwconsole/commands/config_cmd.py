"""Config commands — view and change console settings."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from gwconsole.client.errors import error_handler
from gwconsole.commands import _common
from gwconsole.commands._common import FormatOpt
from gwconsole.output.formatter import output

app = typer.Typer(name="config", help="View and change console settings.")
console = Console()


@app.command()
@error_handler
def show(fmt: FormatOpt = "table") -> None:
    """Show current settings."""
    mgr = _common.get_config_manager()
    output(mgr.settings.model_dump(), fmt, title=f"Settings ({mgr.config_path})")


@app.command("set")
@error_handler
def set_value(
    key: Annotated[str, typer.Argument(help="Setting name, e.g. verify_ssl")],
    value: Annotated[str, typer.Argument(help="New value (empty string to unset)")],
) -> None:
    """Change one setting."""
    mgr = _common.get_config_manager()
    mgr.set_value(key, value)
    console.print(f"[green]{key} updated.[/]")
