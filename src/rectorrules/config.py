"""Configuration and logging setup for the rules catalog."""

import logging
import os
import sys
from dataclasses import dataclass, fields
from pathlib import Path

import yaml
from dotenv import load_dotenv

from rectorrules import __version__

load_dotenv()

RECTOR_RULES_URL = "https://raw.githubusercontent.com/rectorphp/rector/main/docs/rector_rules_overview.md"
DEFAULT_TIMEOUT = 5.0
DEFAULT_USER_AGENT = f"rector-rules-catalog/{__version__}"
DEFAULT_LOG_LEVEL = "INFO"

# Default paths relative to project root
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "catalog_config.yaml"

# Environment variable -> config field
ENV_OVERRIDES = {
    "RECTOR_RULES_URL": "source_url",
    "RECTOR_FETCH_TIMEOUT": "timeout",
    "RECTOR_USER_AGENT": "user_agent",
    "RECTOR_LOG_LEVEL": "log_level",
}

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass
class CatalogConfig:
    """Settings for fetching the rules document."""
    source_url: str = RECTOR_RULES_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = DEFAULT_LOG_LEVEL


def _apply(config: CatalogConfig, values: dict) -> None:
    known = {f.name for f in fields(CatalogConfig)}
    for key, value in values.items():
        if key not in known:
            raise ValueError(f"Unknown config key: {key}. Available: {sorted(known)}")
        if key == "timeout":
            value = float(value)
        setattr(config, key, value)


def load_config(config_path: Path | None = None) -> CatalogConfig:
    """Load configuration from defaults, YAML file, then environment.

    Args:
        config_path: Path to a YAML config file. When omitted, the default
            config/catalog_config.yaml is used if it exists.

    Returns:
        The resolved configuration
    """
    config = CatalogConfig()

    path = config_path or DEFAULT_CONFIG_PATH
    if path.exists():
        with open(path, encoding="utf-8") as f:
            _apply(config, yaml.safe_load(f) or {})
    elif config_path is not None:
        raise FileNotFoundError(f"Config file not found: {path}")

    env_values = {
        field_name: os.environ[env_var]
        for env_var, field_name in ENV_OVERRIDES.items()
        if os.environ.get(env_var)
    }
    _apply(config, env_values)

    return config


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Send log records to stderr; stdout is kept for command output."""
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
