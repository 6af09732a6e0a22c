"""Gateway data models.

The management API spells attributes with hyphens (``ipv4-address``) while
some front ends re-emit them with underscores, so each typed field accepts
both. Attributes this console does not model are kept in ``extras``.
"""

from __future__ import annotations

from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    model_validator,
)


def _alias(name: str) -> Any:
    """Field accepting ``name`` in hyphen or underscore form, dumped hyphenated."""
    hyphenated = name.replace("_", "-")
    return Field(
        default=None,
        validation_alias=AliasChoices(hyphenated, name),
        serialization_alias=hyphenated,
    )


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @property
    def extras(self) -> dict[str, Any]:
        """Server-defined attributes this model does not interpret."""
        return dict(self.model_extra or {})

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class Domain(_WireModel):
    """Domain a gateway belongs to."""

    name: str | None = None
    domain_type: str | None = _alias("domain_type")
    uid: str | None = None


class NetworkInterface(_WireModel):
    """Interface of a gateway, descriptive only."""

    name: str | None = None
    ipv4_address: str | None = _alias("ipv4_address")
    ipv4_mask_length: int | str | None = _alias("ipv4_mask_length")
    interface_type: str | None = _alias("interface_type")

    _received: dict[str, Any] | None = PrivateAttr(default=None)

    @model_validator(mode="wrap")
    @classmethod
    def _keep_received(cls, data: Any, handler: Any) -> NetworkInterface:
        model = handler(data)
        if isinstance(data, dict):
            model._received = dict(data)
        return model

    def as_received(self) -> dict[str, Any]:
        """The interface exactly as the server sent it, keys unchanged."""
        if self._received is not None:
            return dict(self._received)
        return self.to_wire()


class Gateway(_WireModel):
    """Simple gateway object as returned by the management server."""

    uid: str
    name: str = ""
    type: str | None = None
    ipv4_address: str | None = _alias("ipv4_address")
    sic_state: str | None = _alias("sic_state")
    version: str | None = None
    os_name: str | None = _alias("os_name")
    hardware: str | None = None
    domain: Domain | None = None
    interfaces: list[NetworkInterface] = Field(default_factory=list)
    firewall_settings: dict[str, Any] | None = _alias("firewall_settings")


class CloneRequest(BaseModel):
    """Identity of the gateway to create from a source gateway."""

    name: str
    ipv4_address: str
    comment: str | None = None
