"""
Configuration loader for the bond calculation client.

The only tunable value is the service base URL. It comes from
config/client_config.yml when that file exists, and the BOND_API_BASE_URL
environment variable (also read from a .env file) overrides it.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

logger = logging.getLogger(__name__)

BASE_URL_ENV = "BOND_API_BASE_URL"
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "client_config.yml"


class ClientConfig(BaseModel):
    """Bond calculation client configuration"""

    base_url: str

    @field_validator("base_url")
    @classmethod
    def _normalize_base_url(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("base_url must not be empty")
        return value


def load_client_config(config_path: Optional[Path] = None) -> ClientConfig:
    """
    Load and validate client configuration

    Args:
        config_path: Path to a YAML config file. Defaults to config/client_config.yml,
            which is optional; an explicitly given path must exist.

    Returns:
        Validated ClientConfig object

    Raises:
        FileNotFoundError: If an explicit config file doesn't exist
        ValueError: If no usable base URL is configured
    """
    load_dotenv()

    data: Dict[str, Any] = {}
    if config_path is not None and not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    path = config_path or DEFAULT_CONFIG_PATH
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    env_url = os.getenv(BASE_URL_ENV)
    if env_url:
        data["base_url"] = env_url

    if not data.get("base_url"):
        raise ValueError(f"No base URL configured. Set {BASE_URL_ENV} or base_url in {path}")

    try:
        config = ClientConfig(**data)
    except ValidationError as e:
        logger.error("Client configuration validation failed: %s", e)
        raise ValueError(f"Invalid client configuration: {e}") from e

    logger.info("Loaded client configuration (base_url=%s)", config.base_url)
    return config
