"""Output dispatcher — renders gateways as tables, JSON, or YAML."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from rich.console import Console

from gwconsole.models.gateway import Gateway
from gwconsole.output.tables import (
    GATEWAY_COLUMNS,
    INTERFACE_COLUMNS,
    extras_summary,
    gateway_rows,
    gateway_summary,
    interface_rows,
    kv_table,
    make_table,
)

console = Console()

FORMATS = ("table", "json", "yaml")


def _plain(data: Any) -> Any:
    if isinstance(data, Gateway):
        return data.to_wire()
    if isinstance(data, (list, tuple)):
        return [_plain(item) for item in data]
    if hasattr(data, "model_dump"):
        return data.model_dump(mode="json")
    return data


def output_json(data: Any) -> None:
    console.print_json(json.dumps(_plain(data), indent=2, default=str))


def output_yaml(data: Any) -> None:
    import yaml

    console.print(
        yaml.safe_dump(_plain(data), default_flow_style=False, sort_keys=False),
        end="",
    )


def output(data: Any, fmt: str = "table", *, title: str | None = None) -> None:
    """Print a plain mapping in the requested format."""
    if fmt == "json":
        output_json(data)
    elif fmt == "yaml":
        output_yaml(data)
    elif isinstance(data, dict):
        console.print(kv_table(data, title=title))
    else:
        console.print(data)


def output_gateways(
    gateways: Sequence[Gateway], fmt: str = "table", *, title: str = "Gateway Objects",
) -> None:
    if fmt != "table":
        output(list(gateways), fmt)
        return
    if not gateways:
        console.print("[yellow]No gateways found.[/]")
        return
    console.print(make_table(title, GATEWAY_COLUMNS, gateway_rows(gateways)))


def output_gateway(gateway: Gateway, fmt: str = "table") -> None:
    if fmt != "table":
        output(gateway, fmt)
        return
    console.print(kv_table(gateway_summary(gateway), title=f"Gateway {gateway.name}"))
    if gateway.interfaces:
        console.print(make_table("Interfaces", INTERFACE_COLUMNS, interface_rows(gateway)))
    if gateway.firewall_settings:
        console.print(kv_table(gateway.firewall_settings, title="Firewall Settings"))
    if gateway.extras:
        console.print(kv_table(extras_summary(gateway), title="Advanced Properties"))
