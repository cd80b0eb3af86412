"""Configuration management for Crypto Tracker."""
import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv

from crypto_tracker.utils.errors import ConfigurationError
from crypto_tracker.utils.logging import setup_logging

logger = logging.getLogger(__name__)


DEFAULT_CONFIG: Dict[str, Any] = {
    'app': {
        'name': 'Crypto Tracker',
    },
    'api': {
        'coingecko': {
            'base_url': 'https://api.coingecko.com/api/v3',
        },
    },
    'refresh': {
        'interval_seconds': 60,
    },
    'logging': {
        'enabled': True,
        'level': 'INFO',
        'format': 'json',
        'file': None,
        'console': False,
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Config:
    """Application configuration."""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """
        Initialize configuration.

        Args:
            config_path: Optional path to a YAML file overriding the defaults
        """
        self.config_path = Path(config_path) if config_path is not None else None
        self._config: Dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        """Load configuration from defaults, YAML and environment."""
        # Load environment variables from .env
        load_dotenv()

        overrides: Dict[str, Any] = {}
        if self.config_path is not None:
            if not self.config_path.exists():
                raise ConfigurationError(f"Config file not found: {self.config_path}")

            try:
                with open(self.config_path, 'r') as f:
                    overrides = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {self.config_path}: {e}") from e

            if not isinstance(overrides, dict):
                raise ConfigurationError(f"Config file must contain a mapping: {self.config_path}")

        self._config = _merge(DEFAULT_CONFIG, overrides)

        self._validate()

        # Setup logging
        log_config = self._config.get('logging', {})
        setup_logging(
            level=os.getenv('LOG_LEVEL', log_config.get('level', 'INFO')),
            log_file=log_config.get('file'),
            format_type=log_config.get('format', 'json'),
            enabled=log_config.get('enabled', True),
            console=log_config.get('console', False),
        )

        logger.info("Configuration loaded successfully")

    def _validate(self) -> None:
        """Validate configuration values."""
        interval = self.get('refresh.interval_seconds')
        if isinstance(interval, bool) or not isinstance(interval, (int, float)) or interval < 0:
            raise ConfigurationError(
                f"refresh.interval_seconds must be a non-negative number, got {interval!r}"
            )

        base_url = self.get('api.coingecko.base_url')
        if not isinstance(base_url, str) or not base_url.startswith(('http://', 'https://')):
            raise ConfigurationError(f"Invalid api.coingecko.base_url: {base_url!r}")

        if self.get('logging.format') not in ('json', 'text'):
            raise ConfigurationError("logging.format must be 'json' or 'text'")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-separated key.

        Args:
            key: Dot-separated key (e.g., "refresh.interval_seconds")
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self._config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def app_name(self) -> str:
        """Get application name."""
        return self.get('app.name', 'Crypto Tracker')

    @property
    def coingecko_base_url(self) -> str:
        """Get the CoinGecko API base URL."""
        return self.get('api.coingecko.base_url').rstrip('/')

    @property
    def refresh_interval(self) -> float:
        """Get seconds between background refreshes (0 disables them)."""
        return float(self.get('refresh.interval_seconds', 60))


# Global config instance
_config: Optional[Config] = None


def load_config(config_path: Optional[Union[str, Path]] = None) -> Config:
    """Load and return global configuration instance."""
    global _config
    if _config is None:
        _config = Config(config_path)
    return _config


def get_config() -> Config:
    """Get global configuration instance."""
    if _config is None:
        raise ConfigurationError("Configuration not loaded. Call load_config() first.")
    return _config


def reset_config() -> None:
    """Drop the global configuration instance."""
    global _config
    _config = None
