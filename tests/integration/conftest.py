"""Fixtures pointing the CLI at temp config and session files."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

from gwconsole.config.manager import ConfigManager
from gwconsole.config.models import Session
from gwconsole.config.store import SessionStore


@pytest.fixture
def cli_store(tmp_path: Path) -> Iterator[SessionStore]:
    """Patch the CLI to use temp files; yields the session store."""
    store = SessionStore(path=tmp_path / "session.toml")
    config_path = tmp_path / "config.toml"
    with patch(
        "gwconsole.commands._common.get_session_store", return_value=store,
    ), patch(
        "gwconsole.commands._common.get_config_manager",
        side_effect=lambda: ConfigManager(config_path=config_path),
    ):
        yield store


@pytest.fixture
def logged_in(cli_store: SessionStore, session: Session) -> SessionStore:
    cli_store.save(session)
    return cli_store
