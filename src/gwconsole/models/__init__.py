"""Pydantic data models for the management API."""

from gwconsole.models.gateway import CloneRequest, Domain, Gateway, NetworkInterface

__all__ = [
    "CloneRequest",
    "Domain",
    "Gateway",
    "NetworkInterface",
]
