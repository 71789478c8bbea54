"""Constants used across the roku-remote package."""

from __future__ import annotations

from pathlib import Path

APP_NAME = "roku-remote"
DEFAULT_CONFIG_FILENAME = f"{APP_NAME}.cfg"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / APP_NAME / DEFAULT_CONFIG_FILENAME
DEFAULT_ICON_DIRECTORY = Path.home() / ".cache" / APP_NAME / "icons"

DEFAULT_DEVICE_HOST = "192.168.1.61"
DEFAULT_DEVICE_PORT = 8060
DEFAULT_DEVICE_URL = f"http://{DEFAULT_DEVICE_HOST}:{DEFAULT_DEVICE_PORT}"

DEFAULT_TIMEOUT_SECONDS = 10.0

# External Control Protocol endpoints
APPS_PATH = "/query/apps"
ACTIVE_APP_PATH = "/query/active-app"
DEVICE_INFO_PATH = "/query/device-info"
KEYPRESS_PATH = "/keypress"
KEYDOWN_PATH = "/keydown"
KEYUP_PATH = "/keyup"
LAUNCH_PATH = "/launch"
ICON_PATH = "/icon"

LITERAL_PREFIX = "Lit_"
