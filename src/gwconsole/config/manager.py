"""Configuration manager — read/write TOML settings."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import pydantic
import tomli_w

from gwconsole.client.errors import ConfigurationError
from gwconsole.config.constants import CONFIG_FILE
from gwconsole.config.models import ConsoleSettings

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib


def read_toml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        return tomllib.loads(path.read_bytes().decode())
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot parse {path}: {exc}") from exc


def write_toml(path: Path, data: dict[str, Any]) -> None:
    """Write *data* to *path* atomically with owner-only permissions."""
    path.parent.mkdir(parents=True, exist_ok=True)
    os.chmod(path.parent, 0o700)
    temp = path.with_suffix(".tmp")
    fd = os.open(str(temp), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    try:
        os.write(fd, tomli_w.dumps(data).encode())
    finally:
        os.close(fd)
    temp.replace(path)


class ConfigManager:
    """Manages console settings on disk."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._settings: ConsoleSettings | None = None

    @property
    def settings(self) -> ConsoleSettings:
        if self._settings is None:
            self._settings = self._load()
        return self._settings

    def _load(self) -> ConsoleSettings:
        data = read_toml(self.config_path)
        try:
            return ConsoleSettings(**data.get("settings", {}))
        except pydantic.ValidationError as exc:
            raise ConfigurationError(
                f"Invalid settings in {self.config_path}: {exc}"
            ) from exc

    def save(self) -> None:
        defaults = ConsoleSettings().model_dump()
        # Only persist values that differ from the defaults
        settings = {
            key: value
            for key, value in self.settings.model_dump(exclude_none=True).items()
            if value != defaults.get(key)
        }
        write_toml(self.config_path, {"settings": settings} if settings else {})

    def set_value(self, key: str, value: str) -> ConsoleSettings:
        """Set one setting from its string form and persist it."""
        if key not in ConsoleSettings.model_fields:
            known = ", ".join(sorted(ConsoleSettings.model_fields))
            raise ConfigurationError(f"Unknown setting '{key}'. Known settings: {known}")
        data = self.settings.model_dump()
        data[key] = value if value != "" else None
        try:
            self._settings = ConsoleSettings.model_validate(data)
        except pydantic.ValidationError as exc:
            raise ConfigurationError(f"Invalid value for {key}: {value!r}") from exc
        self.save()
        return self._settings
