"""Configuration for kickstart.

Stored as JSON in ~/.kickstart/config.json (or $KICKSTART_CONFIG).
Holds the default data bundle used by `kickstart new --default` and the
framework version injected into generated package.json files.
"""

import json
import logging
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

from filelock import FileLock

from kickstart.core.models import AppTemplate, NpmClient
from kickstart.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV = "KICKSTART_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".kickstart" / "config.json"


@dataclass
class KickstartConfig:
    """Configuration for kickstart (stored in config.json)."""
    # Default data bundle
    author: str = "umijs"
    email: str = "i@domain.com"
    npm_client: str = "pnpm"
    registry: str = "https://registry.npmjs.com/"
    app_template: str = "app"
    plugin_name: str = "umi-plugin-demo"

    # Version specifier source for generated package.json
    framework_version: str = "4.3.0"

    def to_dict(self) -> dict:
        return asdict(self)

    def validate(self) -> None:
        """Raise ConfigError for values outside the known choices."""
        try:
            NpmClient(self.npm_client)
            AppTemplate(self.app_template)
        except ValueError as e:
            raise ConfigError(f"Invalid config value: {e}")

    @classmethod
    def from_dict(cls, data: dict) -> "KickstartConfig":
        return cls(**{
            k: v for k, v in data.items()
            if k in cls.__dataclass_fields__
        })


def get_config_path(path: Optional[Path] = None) -> Path:
    """Resolve the config file location (explicit > env > home)."""
    if path:
        return Path(path)
    env = os.environ.get(CONFIG_ENV)
    if env:
        return Path(env)
    return DEFAULT_CONFIG_PATH


def _lock_for(path: Path) -> FileLock:
    return FileLock(str(path.with_suffix(path.suffix + ".lock")), timeout=10)


def load_config(path: Optional[Path] = None) -> KickstartConfig:
    """Load configuration, falling back to defaults when the file is missing.

    Raises:
        ConfigError: If the file exists but is not valid JSON
    """
    config_path = get_config_path(path)
    if not config_path.exists():
        logger.debug("No config at %s, using defaults", config_path)
        return KickstartConfig()

    with _lock_for(config_path):
        try:
            data = json.loads(config_path.read_text())
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Cannot read config {config_path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Config {config_path} must contain a JSON object")
    config = KickstartConfig.from_dict(data)
    config.validate()
    return config


def save_config(config: KickstartConfig, path: Optional[Path] = None) -> Path:
    """Write configuration as JSON and return the path written."""
    config_path = get_config_path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with _lock_for(config_path):
        config_path.write_text(json.dumps(config.to_dict(), indent=2) + "\n")
    return config_path


def set_config_value(key: str, value: str, path: Optional[Path] = None) -> KickstartConfig:
    """Update a single key and save.

    Raises:
        ConfigError: If the key is unknown or the value is not a valid choice
    """
    fields = KickstartConfig.__dataclass_fields__
    if key not in fields:
        raise ConfigError(f"Unknown config key: {key}. Available: {', '.join(fields)}")

    config = load_config(path)
    setattr(config, key, value)
    config.validate()
    save_config(config, path)
    return config
