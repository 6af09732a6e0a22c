"""Durable key-value store holding the login session between runs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from gwconsole.config.constants import SESSION_FILE
from gwconsole.config.manager import read_toml, write_toml
from gwconsole.config.models import Session

logger = logging.getLogger(__name__)

SERVER_URL_KEY = "server_url"
SESSION_TOKEN_KEY = "session_token"


class SessionStore:
    """TOML-backed get/set/remove store for ``server_url`` and ``session_token``."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or SESSION_FILE

    def get(self, key: str) -> Any:
        return read_toml(self.path).get(key)

    def set(self, key: str, value: str) -> None:
        data = read_toml(self.path)
        data[key] = value
        write_toml(self.path, data)

    def remove(self, key: str) -> None:
        data = read_toml(self.path)
        if data.pop(key, None) is not None:
            write_toml(self.path, data)

    def load(self) -> Session:
        """Build the Session persisted by the last login, if any."""
        data = read_toml(self.path)
        return Session(
            server_url=data.get(SERVER_URL_KEY, ""),
            session_token=data.get(SESSION_TOKEN_KEY),
        )

    def save(self, session: Session) -> None:
        data = {SERVER_URL_KEY: session.server_url}
        if session.session_token:
            data[SESSION_TOKEN_KEY] = session.session_token
        write_toml(self.path, data)
        logger.debug("Session for %s saved to %s", session.server_url, self.path)

    def clear(self) -> None:
        """Erase everything, server URL included."""
        self.path.unlink(missing_ok=True)
