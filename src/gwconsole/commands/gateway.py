"""Gateway commands — list, show, clone, publish."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console

from gwconsole.client.errors import error_handler
from gwconsole.commands._common import FormatOpt, load_session, load_settings
from gwconsole.models.gateway import CloneRequest
from gwconsole.output.formatter import output_gateway, output_gateways
from gwconsole.services.clone import clone_gateway, publish_changes, validate_clone_request
from gwconsole.services.gateways import GatewayCollection, get_gateway

app = typer.Typer(name="gateway", help="List, inspect, and clone gateway objects.")
console = Console()


@app.command("list")
@error_handler
def list_cmd(
    search: Annotated[
        Optional[str],
        typer.Option("--search", "-s", help="Filter by name or IP address (case-insensitive)"),
    ] = None,
    fmt: FormatOpt = "table",
) -> None:
    """List gateway objects."""
    collection = GatewayCollection(load_session(), load_settings())
    collection.refresh()
    gateways = collection.filter(search or "")
    output_gateways(gateways, fmt)


@app.command()
@error_handler
def show(
    uid: Annotated[str, typer.Argument(help="Gateway UID")],
    fmt: FormatOpt = "table",
) -> None:
    """Show the full configuration of one gateway."""
    gateway = get_gateway(load_session(), uid, load_settings())
    output_gateway(gateway, fmt)


@app.command()
@error_handler
def clone(
    source_uid: Annotated[str, typer.Argument(help="UID of the gateway to copy")],
    name: Annotated[str, typer.Option("--name", "-n", help="Name of the new gateway")],
    ip: Annotated[str, typer.Option("--ip", help="IPv4 address of the new gateway")],
    comment: Annotated[
        Optional[str], typer.Option("--comment", "-c", help="Comment for the new gateway"),
    ] = None,
    fmt: FormatOpt = "table",
) -> None:
    """Create a new gateway from an existing one and publish it."""
    session = load_session()
    settings = load_settings()
    request = CloneRequest(name=name, ipv4_address=ip, comment=comment)
    validate_clone_request(request)
    source = get_gateway(session, source_uid, settings)
    created = clone_gateway(session, source, request, settings)
    console.print(f"[green]Gateway cloned successfully: {created.name} ({created.uid})[/]")
    output_gateway(created, fmt)


@app.command()
@error_handler
def publish() -> None:
    """Publish pending changes, e.g. a clone whose publish step failed."""
    task_id = publish_changes(load_session(), load_settings())
    console.print(f"[green]Changes published (task {task_id}).[/]")
