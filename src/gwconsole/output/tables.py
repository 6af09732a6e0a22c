"""Rich table rendering helpers."""

from __future__ import annotations

import json
from typing import Any, Sequence

from rich.table import Table

from gwconsole.models.gateway import Gateway

GATEWAY_COLUMNS = ("Name", "IP Address", "Type", "SIC State", "UID")
INTERFACE_COLUMNS = ("Name", "IPv4 Address", "Mask Length", "Type")


def _cell(value: Any) -> str:
    return str(value) if value is not None else ""


def make_table(
    title: str | None,
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
) -> Table:
    table = Table(title=title)
    for col in columns:
        table.add_column(col, no_wrap=False)
    for row in rows:
        table.add_row(*(_cell(cell) for cell in row))
    return table


def kv_table(data: dict[str, Any], *, title: str | None = None) -> Table:
    """Render a key-value dict as a two-column table."""
    table = Table(title=title, show_header=False)
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")
    for key, value in data.items():
        table.add_row(key, _cell(value))
    return table


def gateway_rows(gateways: Sequence[Gateway]) -> list[list[Any]]:
    return [
        [gw.name, gw.ipv4_address, gw.type, gw.sic_state or "unknown", gw.uid]
        for gw in gateways
    ]


def gateway_summary(gateway: Gateway) -> dict[str, Any]:
    """Headline attributes of one gateway, in display order."""
    summary: dict[str, Any] = {
        "uid": gateway.uid,
        "name": gateway.name,
        "type": gateway.type,
        "ipv4-address": gateway.ipv4_address,
        "sic-state": gateway.sic_state,
        "version": gateway.version,
        "os-name": gateway.os_name,
        "hardware": gateway.hardware,
    }
    if gateway.domain is not None:
        summary["domain"] = gateway.domain.name
    return {key: value for key, value in summary.items() if value is not None}


def interface_rows(gateway: Gateway) -> list[list[Any]]:
    return [
        [iface.name, iface.ipv4_address, iface.ipv4_mask_length, iface.interface_type]
        for iface in gateway.interfaces
    ]


def extras_summary(gateway: Gateway) -> dict[str, Any]:
    """Attributes the model does not interpret; nested values as JSON text."""
    return {
        key: json.dumps(value) if isinstance(value, (dict, list)) else value
        for key, value in gateway.extras.items()
    }
