"""Tests for settings, the config manager and the session store."""

import stat

import pytest
from pydantic import ValidationError

from gwconsole.client.errors import ConfigurationError
from gwconsole.config.manager import ConfigManager
from gwconsole.config.models import ConsoleSettings, Session
from gwconsole.config.store import SessionStore


class TestSession:
    def test_unauthenticated_by_default(self):
        assert Session().is_authenticated is False

    def test_authenticated_needs_url_and_token(self):
        assert Session(server_url="https://m", session_token="s").is_authenticated
        assert not Session(server_url="https://m").is_authenticated
        assert not Session(session_token="s").is_authenticated

    def test_strips_trailing_slash(self):
        assert Session(server_url="https://mgmt/").server_url == "https://mgmt"

    def test_url_must_start_with_http(self):
        with pytest.raises(ValidationError, match="URL must start with http"):
            Session(server_url="mgmt.example")


class TestConsoleSettings:
    def test_defaults(self):
        s = ConsoleSettings()
        assert s.verify_ssl is True
        assert s.timeout == 30.0
        assert s.list_limit == 500
        assert s.default_domain is None

    def test_timeout_bounds(self):
        with pytest.raises(ValidationError):
            ConsoleSettings(timeout=0)

    def test_list_limit_bounds(self):
        with pytest.raises(ValidationError):
            ConsoleSettings(list_limit=501)


class TestConfigManager:
    def test_load_missing_file(self, config_manager: ConfigManager):
        assert config_manager.settings == ConsoleSettings()

    def test_set_value_persists(self, config_manager: ConfigManager):
        config_manager.set_value("verify_ssl", "false")
        config_manager.set_value("timeout", "12.5")
        reloaded = ConfigManager(config_path=config_manager.config_path)
        assert reloaded.settings.verify_ssl is False
        assert reloaded.settings.timeout == 12.5

    def test_defaults_not_written(self, config_manager: ConfigManager):
        config_manager.set_value("default_domain", "Global")
        text = config_manager.config_path.read_text()
        assert "default_domain" in text
        assert "timeout" not in text

    def test_unset_with_empty_string(self, config_manager: ConfigManager):
        config_manager.set_value("default_domain", "Global")
        config_manager.set_value("default_domain", "")
        assert config_manager.settings.default_domain is None

    def test_unknown_key(self, config_manager: ConfigManager):
        with pytest.raises(ConfigurationError, match="Unknown setting"):
            config_manager.set_value("colour", "blue")

    def test_invalid_value(self, config_manager: ConfigManager):
        with pytest.raises(ConfigurationError, match="Invalid value"):
            config_manager.set_value("timeout", "forever")

    def test_invalid_file(self, config_manager: ConfigManager):
        config_manager.config_path.write_text("[settings]\ntimeout = -1\n")
        with pytest.raises(ConfigurationError, match="Invalid settings"):
            _ = config_manager.settings

    def test_unparseable_file(self, config_manager: ConfigManager):
        config_manager.config_path.write_text("not = [toml")
        with pytest.raises(ConfigurationError, match="Cannot parse"):
            _ = config_manager.settings


class TestSessionStore:
    def test_load_empty(self, session_store: SessionStore):
        session = session_store.load()
        assert session.server_url == ""
        assert session.session_token is None

    def test_save_and_load(self, session_store: SessionStore, session: Session):
        session_store.save(session)
        assert SessionStore(path=session_store.path).load() == session

    def test_file_is_owner_only(self, session_store: SessionStore, session: Session):
        session_store.save(session)
        mode = stat.S_IMODE(session_store.path.stat().st_mode)
        assert mode == 0o600

    def test_get_set_remove(self, session_store: SessionStore):
        session_store.set("server_url", "https://mgmt")
        session_store.set("session_token", "abc")
        assert session_store.get("session_token") == "abc"
        session_store.remove("session_token")
        assert session_store.get("session_token") is None
        assert session_store.get("server_url") == "https://mgmt"

    def test_remove_missing_key(self, session_store: SessionStore):
        session_store.remove("session_token")
        assert not session_store.path.exists()

    def test_clear(self, session_store: SessionStore, session: Session):
        session_store.save(session)
        session_store.clear()
        assert not session_store.path.exists()
        session_store.clear()
