"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from gwconsole.config.manager import ConfigManager
from gwconsole.config.models import Session
from gwconsole.config.store import SessionStore
from gwconsole.models.gateway import Gateway

SERVER = "https://mgmt.example"


@pytest.fixture
def config_manager(tmp_path: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_path / "config.toml")


@pytest.fixture
def session_store(tmp_path: Path) -> SessionStore:
    """Return a SessionStore pointed at a temp file."""
    return SessionStore(path=tmp_path / "session.toml")


@pytest.fixture
def session() -> Session:
    return Session(server_url=SERVER, session_token="sid-123")


@pytest.fixture
def mock_gateway() -> dict:
    """Sample show-simple-gateway reply (hyphenated web_api spelling)."""
    return {
        "uid": "g1",
        "name": "fw-east",
        "type": "simple-gateway",
        "ipv4-address": "10.0.0.1",
        "sic-state": "communicating",
        "version": "R81",
        "os-name": "Gaia",
        "hardware": "Open server",
        "domain": {"name": "SMC User", "domain-type": "domain", "uid": "d1"},
        "interfaces": [
            {
                "name": "eth0",
                "ipv4-address": "10.0.0.1",
                "ipv4-mask-length": 24,
                "topology": "external",
            },
        ],
        "firewall-settings": {"auto-calculate-connections-hash-table-size-and-memory-pool": True},
        "color": "black",
        "tags": [],
    }


@pytest.fixture
def mock_gateways(mock_gateway: dict) -> list[dict]:
    """Sample show-simple-gateways objects."""
    return [
        mock_gateway,
        {
            "uid": "g2",
            "name": "FW-West",
            "type": "simple-gateway",
            "ipv4-address": "192.168.10.1",
            "version": "R80.40",
        },
        {
            "uid": "g3",
            "name": "branch-office",
            "type": "simple-gateway",
            "ipv4-address": "172.16.5.1",
        },
    ]


@pytest.fixture
def source_gateway(mock_gateway: dict) -> Gateway:
    return Gateway.model_validate(mock_gateway)
