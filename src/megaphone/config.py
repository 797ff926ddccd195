"""Configuration management for megaphone.

Handles TOML configuration loading from local and global paths,
with environment variable precedence for every value.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from megaphone.errors import ConfigError

# Configuration file paths
LOCAL_CONFIG_PATH = Path(".megaphone/config")
GLOBAL_CONFIG_PATH = Path.home() / ".megaphone" / "config"

DEFAULT_API_BASE_URL = "https://cms.megaphone.fm/api"

# Default timeout for API requests (in seconds)
DEFAULT_TIMEOUT = 30.0

# Environment variables, keyed by the config field they override
ENV_OVERRIDES = {
    "token": "MEGAPHONE_TOKEN",
    "network_id": "MEGAPHONE_NETWORK_ID",
    "api_base_url": "MEGAPHONE_API_BASE_URL",
}

_STRING_FIELDS = ("api_base_url", "network_id", "token")


@dataclass(frozen=True)
class Config:
    """Settings shared by every request against one Megaphone network.

    Attributes:
        network_id: Network identifier injected into every resource path.
        token: API token sent in the Authorization header.
        api_base_url: Base URL for the API, without a trailing slash.
        timeout: Request timeout in seconds.
    """

    network_id: str
    token: str
    api_base_url: str = DEFAULT_API_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        object.__setattr__(self, "api_base_url", self.api_base_url.rstrip("/"))

    def __repr__(self) -> str:
        return (
            f"Config(network_id={self.network_id!r}, token='***', "
            f"api_base_url={self.api_base_url!r}, timeout={self.timeout!r})"
        )

    @property
    def network_url(self) -> str:
        """URL of the configured network, the prefix of all podcast paths."""
        return f"{self.api_base_url}/networks/{self.network_id}"


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load the ``[megaphone]`` table of a TOML configuration file.

    Args:
        path: Path to the TOML file.

    Returns:
        The table's contents, or an empty dict when the file does not exist.

    Raises:
        ConfigError: If the file exists but cannot be parsed.
    """
    if not path.exists():
        return {}

    try:
        data = tomllib.loads(path.read_text())
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in config file {path}: {e}") from e

    table = data.get("megaphone", {})
    if not isinstance(table, dict):
        raise ConfigError(f"[megaphone] in {path} must be a table")
    return table


def _apply_env_overrides(values: dict[str, Any]) -> dict[str, Any]:
    result = values.copy()
    for key, env_name in ENV_OVERRIDES.items():
        env_value = os.environ.get(env_name, "")
        if env_value:
            result[key] = env_value
    return result


def _validate_config(values: dict[str, Any]) -> None:
    """Validate merged configuration values.

    Raises:
        ConfigError: If a value has the wrong type or a required value is missing.
    """
    for key in _STRING_FIELDS:
        value = values.get(key)
        if value is not None and not isinstance(value, str):
            raise ConfigError(f"megaphone.{key} must be a string, got {type(value).__name__}")

    timeout = values.get("timeout")
    if timeout is not None:
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise ConfigError(
                f"megaphone.timeout must be a number, got {type(timeout).__name__}"
            )
        if timeout <= 0:
            raise ConfigError(f"megaphone.timeout must be positive, got {timeout}")

    missing = [
        f"{key} (or {ENV_OVERRIDES[key]})"
        for key in ("token", "network_id")
        if not values.get(key)
    ]
    if missing:
        raise ConfigError(f"Missing required configuration: {', '.join(missing)}")


def load_config(
    path: Path | None = None,
    global_path: Path | None = None,
) -> Config:
    """Load configuration from config files and the environment.

    Configuration priority (highest to lowest):
    1. MEGAPHONE_* environment variables
    2. ``path`` if given, otherwise the local file (.megaphone/config)
    3. Global config file ($HOME/.megaphone/config)
    4. Default values

    Args:
        path: Override path for the local config file.
        global_path: Override path for the global config file.

    Returns:
        Config object with merged configuration values.

    Raises:
        ConfigError: If configuration files are invalid or incomplete.
    """
    local_path = path or LOCAL_CONFIG_PATH
    global_path = global_path or GLOBAL_CONFIG_PATH

    merged: dict[str, Any] = {
        "api_base_url": DEFAULT_API_BASE_URL,
        "timeout": DEFAULT_TIMEOUT,
    }
    merged.update(_load_toml_file(global_path))
    merged.update(_load_toml_file(local_path))
    merged = _apply_env_overrides(merged)

    _validate_config(merged)

    return Config(
        network_id=merged["network_id"],
        token=merged["token"],
        api_base_url=merged["api_base_url"],
        timeout=float(merged["timeout"]),
    )
