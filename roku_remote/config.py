"""Configuration loader for roku-remote."""

from __future__ import annotations

from configparser import ConfigParser
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from . import constants


@dataclass(slots=True)
class DeviceConfig:
    url: str = constants.DEFAULT_DEVICE_URL
    timeout_seconds: float = constants.DEFAULT_TIMEOUT_SECONDS


@dataclass(slots=True)
class IconConfig:
    directory: Path = constants.DEFAULT_ICON_DIRECTORY


@dataclass(slots=True)
class LoggingConfig:
    level: str = "INFO"
    path: Optional[Path] = None
    log_network: bool = False


@dataclass(slots=True)
class RemoteConfig:
    device: DeviceConfig
    icons: IconConfig
    logging: LoggingConfig
    raw: ConfigParser
    path: Path


def load_config(path: Optional[Path] = None) -> RemoteConfig:
    """Load configuration from disk, applying defaults where necessary."""

    config_path = path or constants.DEFAULT_CONFIG_PATH
    parser = ConfigParser()
    parser.read_dict(
        {
            "device": {
                "url": constants.DEFAULT_DEVICE_URL,
                "timeout_seconds": str(constants.DEFAULT_TIMEOUT_SECONDS),
            },
            "icons": {
                "directory": str(constants.DEFAULT_ICON_DIRECTORY),
            },
            "logging": {
                "level": "INFO",
                "path": "",
                "log_network": "false",
            },
        }
    )

    if config_path.exists():
        parser.read(config_path)

    try:
        timeout_value = parser.getfloat(
            "device", "timeout_seconds", fallback=constants.DEFAULT_TIMEOUT_SECONDS
        )
    except ValueError:
        timeout_value = constants.DEFAULT_TIMEOUT_SECONDS
    if timeout_value <= 0:
        timeout_value = constants.DEFAULT_TIMEOUT_SECONDS

    device = DeviceConfig(
        url=parser.get("device", "url").strip().rstrip("/"),
        timeout_seconds=timeout_value,
    )

    icons = IconConfig(
        directory=Path(
            parser.get(
                "icons", "directory", fallback=str(constants.DEFAULT_ICON_DIRECTORY)
            )
        ).expanduser(),
    )

    log_path_value = parser.get("logging", "path", fallback="").strip()
    logging_config = LoggingConfig(
        level=parser.get("logging", "level", fallback="INFO"),
        path=Path(log_path_value).expanduser() if log_path_value else None,
        log_network=parser.getboolean("logging", "log_network", fallback=False),
    )

    return RemoteConfig(
        device=device,
        icons=icons,
        logging=logging_config,
        raw=parser,
        path=config_path,
    )


def save_config(config: RemoteConfig) -> None:
    """Persist the current configuration to disk."""

    config_path = config.path
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with config_path.open("w", encoding="utf-8") as stream:
        config.raw.write(stream)
