"""Pydantic models for console configuration and the login session."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from gwconsole.config.constants import DEFAULT_LIST_LIMIT, DEFAULT_TIMEOUT


class Session(BaseModel):
    """Authenticated context shared by every call after login.

    ``session_token`` is set exactly when the operator is logged in.
    """

    server_url: str = ""
    session_token: str | None = None

    @field_validator("server_url")
    @classmethod
    def validate_server_url(cls, v: str) -> str:
        v = v.strip()
        if v and not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @property
    def is_authenticated(self) -> bool:
        return bool(self.server_url) and bool(self.session_token)


class ConsoleSettings(BaseModel):
    """Connection settings read from config.toml."""

    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, le=600,
        description="Request timeout in seconds",
    )
    list_limit: int = Field(
        default=DEFAULT_LIST_LIMIT, ge=1, le=500,
        description="Maximum gateways returned by a list call",
    )
    default_domain: str | None = Field(
        default=None, description="Domain used at login when none is given",
    )
