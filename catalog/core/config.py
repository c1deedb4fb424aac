"""
Configuration management for the product catalog service.

Loads settings from an optional YAML config file, then applies environment
variable overrides (PORT, API_KEY, HOST, LOG_LEVEL).
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()


def _project_root() -> Path:
    """Return project root (parent of catalog package)."""
    return Path(__file__).resolve().parent.parent.parent


DEFAULT_CONFIG_PATH = _project_root() / "config" / "default.yaml"

DEFAULT_PORT = 3000
DEFAULT_API_KEY = "my-secret-api-key"


@dataclass
class CatalogConfig:
    """Configuration for the catalog HTTP service."""

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    api_key: str = DEFAULT_API_KEY       # Shared secret expected in x-api-key
    log_level: str = "INFO"

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "CatalogConfig":
        """Load configuration from YAML file."""
        path = config_path or DEFAULT_CONFIG_PATH
        if not path.exists():
            return cls()

        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}

        server_config = data.get('catalog', {})
        auth_config = data.get('auth', {})
        logging_config = data.get('logging', {})

        return cls(
            host=server_config.get('host', '0.0.0.0'),
            port=int(server_config.get('port', DEFAULT_PORT)),
            api_key=auth_config.get('api_key', DEFAULT_API_KEY),
            log_level=str(logging_config.get('level', 'INFO')).upper(),
        )

    def with_env_overrides(self, environ: Optional[Mapping[str, str]] = None) -> "CatalogConfig":
        """
        Apply environment variable overrides on top of this config.

        Empty variables are treated as unset. A non-numeric PORT raises ValueError.
        """
        env = os.environ if environ is None else environ
        overrides: Dict[str, Any] = {}

        if env.get("HOST"):
            overrides["host"] = env["HOST"]
        if env.get("PORT"):
            try:
                overrides["port"] = int(env["PORT"])
            except ValueError:
                raise ValueError(f"PORT must be an integer, got {env['PORT']!r}")
        if env.get("API_KEY"):
            overrides["api_key"] = env["API_KEY"]
        if env.get("LOG_LEVEL"):
            overrides["log_level"] = env["LOG_LEVEL"].upper()

        return CatalogConfig(
            host=overrides.get("host", self.host),
            port=overrides.get("port", self.port),
            api_key=overrides.get("api_key", self.api_key),
            log_level=overrides.get("log_level", self.log_level),
        )

    @classmethod
    def load(
        cls,
        config_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "CatalogConfig":
        """Defaults, then YAML file (CATALOG_CONFIG or config/default.yaml), then environment."""
        env = os.environ if environ is None else environ
        if config_path is None and env.get("CATALOG_CONFIG"):
            config_path = Path(env["CATALOG_CONFIG"])
        return cls.from_yaml(config_path).with_env_overrides(env)


# Global config instance
_config: Optional[CatalogConfig] = None


def get_config() -> CatalogConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = CatalogConfig.load()
    return _config


def set_config(config: Optional[CatalogConfig]) -> None:
    """Set the global configuration instance (None forces a reload on next access)."""
    global _config
    _config = config
