"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "gwconsole"
APP_AUTHOR = "gwconsole"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"
SESSION_FILE = CONFIG_DIR / "session.toml"

# Environment variable names
ENV_SERVER_URL = "GWCONSOLE_SERVER_URL"
ENV_USERNAME = "GWCONSOLE_USERNAME"
ENV_PASSWORD = "GWCONSOLE_PASSWORD"
ENV_DOMAIN = "GWCONSOLE_DOMAIN"

# API defaults
DEFAULT_API_BASE = "/web_api"
DEFAULT_TIMEOUT = 30.0
DEFAULT_LIST_LIMIT = 500
SESSION_HEADER = "X-chkp-sid"
DETAILS_LEVEL_FULL = "full"
