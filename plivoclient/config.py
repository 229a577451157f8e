"""Configuration system for plivoclient.

Supports loading from YAML files, dicts, environment variables, or
programmatic construction via Pydantic models. The config carries the
account credentials and the HTTP settings used by :class:`RestAPI`.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

DEFAULT_BASE_URL = "https://api.plivo.com"
DEFAULT_API_VERSION = "v1"
DEFAULT_USER_AGENT = "plivoclient-python"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"


class ClientConfig(BaseModel):
    """Top-level plivoclient configuration.

    Examples:
        # Programmatic
        config = ClientConfig(auth_id="MAXXXXXXXXXXXXXXXXXXXX", auth_token="...")

        # From YAML
        config = ClientConfig.from_yaml("plivo.yaml")

        # Shorthand
        config = ClientConfig.from_dict({
            "auth_id": "MAXXXXXXXXXXXXXXXXXXXX",
            "auth_token": "...",
            "log_level": "DEBUG",
        })
    """

    auth_id: str = ""
    auth_token: str = ""
    version: str = DEFAULT_API_VERSION
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=30.0, gt=0)
    user_agent: str = DEFAULT_USER_AGENT
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def has_credentials(self) -> bool:
        return bool(self.auth_id and self.auth_token)

    @classmethod
    def from_yaml(cls, path: str | Path) -> ClientConfig:
        """Load configuration from a YAML file."""
        path = Path(path)
        with path.open() as f:
            data = yaml.safe_load(f) or {}
        return cls._from_raw(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ClientConfig:
        """Load configuration from a dictionary.

        Accepts the nested ``{"logging": {"level": ...}}`` form as well as
        the flat ``log_level`` shorthand.
        """
        return cls._from_raw(dict(data))

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> ClientConfig:
        """Build a config from ``PLIVO_*`` environment variables."""
        env = os.environ if environ is None else environ
        env_mappings = {
            "PLIVO_AUTH_ID": "auth_id",
            "PLIVO_AUTH_TOKEN": "auth_token",
            "PLIVO_API_VERSION": "version",
            "PLIVO_BASE_URL": "base_url",
            "PLIVO_LOG_LEVEL": "log_level",
        }
        data = {key: env[name] for name, key in env_mappings.items() if env.get(name)}
        return cls._from_raw(data)

    @classmethod
    def _from_raw(cls, data: dict[str, Any]) -> ClientConfig:
        """Normalize and construct config from a raw dict."""
        if "log_level" in data:
            data.setdefault("logging", {})
            data["logging"]["level"] = data.pop("log_level")
        return cls(**data)


def load_config(source: str | Path | dict[str, Any] | ClientConfig | None = None) -> ClientConfig:
    """Load a ClientConfig from any supported source.

    Args:
        source: A YAML file path (str/Path), a dict, an existing ClientConfig,
            or None to read the environment.

    Returns:
        A ClientConfig instance.
    """
    if source is None:
        return ClientConfig.from_env()
    if isinstance(source, ClientConfig):
        return source
    if isinstance(source, dict):
        return ClientConfig.from_dict(source)
    if isinstance(source, (str, Path)):
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        if path.suffix not in (".yaml", ".yml"):
            raise ValueError(f"Unsupported config file type '{path.suffix}': {path}")
        return ClientConfig.from_yaml(path)
    raise TypeError(f"Cannot load config from {type(source)}")


# Default YAML template for `plivoclient init`
DEFAULT_CONFIG_YAML = """\
# plivoclient configuration

auth_id: MAXXXXXXXXXXXXXXXXXXXX   # account auth ID
auth_token: your_auth_token
version: v1
base_url: https://api.plivo.com
timeout: 30.0

logging:
  level: INFO
"""
