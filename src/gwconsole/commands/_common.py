"""Shared helpers for CLI commands — settings, session and option types."""

from __future__ import annotations

from typing import Annotated

import typer

from gwconsole.config.manager import ConfigManager
from gwconsole.config.models import ConsoleSettings, Session
from gwconsole.config.store import SessionStore
from gwconsole.output.formatter import FORMATS
from gwconsole.services.auth import Authenticator


def _validate_format(value: str) -> str:
    if value not in FORMATS:
        raise typer.BadParameter(f"choose from {', '.join(FORMATS)}")
    return value


# Shared Typer option type aliases
FormatOpt = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format", callback=_validate_format),
]


def get_config_manager() -> ConfigManager:
    return ConfigManager()


def get_session_store() -> SessionStore:
    return SessionStore()


def load_settings() -> ConsoleSettings:
    return get_config_manager().settings


def make_authenticator() -> Authenticator:
    return Authenticator(get_session_store(), load_settings())


def load_session() -> Session:
    """Session persisted by the last login."""
    return get_session_store().load()


def mask_token(token: str | None) -> str:
    if not token:
        return ""
    return token[:6] + "..." if len(token) > 12 else "***"
