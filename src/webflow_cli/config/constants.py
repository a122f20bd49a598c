"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "webflow-cli"
APP_AUTHOR = "webflow-cli"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_API_TOKEN = "WEBFLOW_API_TOKEN"
ENV_BASE_URL = "WEBFLOW_BASE_URL"
ENV_PROFILE = "WEBFLOW_PROFILE"

# API defaults
DEFAULT_BASE_URL = "https://api.webflow.com"
DEFAULT_API_VERSION = "1.0.0"
DEFAULT_TIMEOUT = 10.0
DEFAULT_PAGE_SIZE = 20
