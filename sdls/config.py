"""Configuration loading for sdls.

The configuration is a YAML mapping read once per invocation::

    host: http://nas.local:5000
    username: admin
    password: secret
    op_item_name: Synology
    op_account: my.1password.com
    directories:
      - downloads
      - video
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigError

CONFIG_PATH_ENV_VAR = "SDLS_CONFIG_PATH"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "sdls.yml"
DEFAULT_TIMEOUT_SECONDS = 30.0

REQUIRED_KEYS = ("host",)
OPTIONAL_STRING_KEYS = ("username", "password", "op_item_name", "op_account")


@dataclass(frozen=True)
class Config:
    """Immutable view of the configuration file."""

    host: str
    username: str | None = None
    password: str | None = None
    op_item_name: str | None = None
    op_account: str | None = None
    directories: tuple[str, ...] = ()

    def __repr__(self) -> str:
        password = "[REDACTED]" if self.password else None
        return (
            f"Config(host={self.host!r}, username={self.username!r}, password={password!r}, "
            f"op_item_name={self.op_item_name!r}, op_account={self.op_account!r}, "
            f"directories={self.directories!r})"
        )


def sanitize_host(host: str) -> str:
    """Ensure the host never ends with a trailing slash."""

    return host.strip().rstrip("/")


def get_config_path(path: str | Path | None = None) -> Path:
    """Resolve the config path: explicit argument > SDLS_CONFIG_PATH > ~/.config/sdls.yml."""
    if path:
        return Path(path).expanduser()
    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_PATH


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _optional_string(data: dict[str, Any], key: str, path: Path) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if not isinstance(value, str):
        raise ConfigError(f"Configuration file ({path}) has an invalid value for {key}")
    return value


def _directories(data: dict[str, Any], path: Path) -> tuple[str, ...]:
    value = data.get("directories")
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"Configuration file ({path}) has an invalid value for directories")
    return tuple(value)


def build_config(data: dict[str, Any], path: Path) -> Config:
    """Validate a parsed mapping and assemble a Config."""
    missing = [key for key in REQUIRED_KEYS if _is_blank(data.get(key))]
    if missing:
        raise ConfigError(
            f"Configuration file ({path}) is missing required keys or values: {', '.join(missing)}"
        )

    optional = {key: _optional_string(data, key, path) for key in OPTIONAL_STRING_KEYS}
    return Config(
        host=sanitize_host(str(data["host"])),
        directories=_directories(data, path),
        **optional,
    )


def load_config(path: str | Path | None = None) -> Config:
    """Load and validate the configuration file.

    Raises:
        ConfigError: If the file is missing, is not valid YAML, or lacks a host.
    """
    config_path = get_config_path(path)
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        data = yaml.safe_load(config_path.read_text())
    except yaml.YAMLError as e:
        raise ConfigError(f"Error parsing configuration file ({config_path}): {e}") from e
    except OSError as e:
        raise ConfigError(f"Could not read configuration file ({config_path}): {e}") from e

    if not isinstance(data, dict):
        data = {}

    return build_config(data, config_path)
