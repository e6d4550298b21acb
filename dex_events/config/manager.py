"""
Configuration manager for dex-events.

This module provides a centralized way to access all configuration settings
across the application. It combines all configuration classes into a single
easy-to-use interface.
"""

import logging
from typing import Dict, Any, Optional
from .base import BaseConfig, ConfigError
from .indexer import IndexerConfig
from .server import ServerConfig

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Centralized configuration manager that combines all configuration classes.

    Configuration is only read at the edges of the application (HTTP server,
    CLI) and handed inward explicitly.
    """

    def __init__(self, environment: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            environment: Override the environment (local, dev, staging, production, test)
        """
        self._environment = environment
        self._base_config = None
        self._indexer_config = None
        self._server_config = None
        self._initialize_configs()

    def _initialize_configs(self):
        """Initialize all configuration objects."""
        overrides = {"ENVIRONMENT": self._environment} if self._environment else {}
        try:
            self._base_config = BaseConfig(**overrides)
            self._indexer_config = IndexerConfig(**overrides)
            self._server_config = ServerConfig(**overrides)
        except ConfigError:
            raise
        except Exception as e:
            logger.error(f"Failed to initialize configuration: {e}")
            raise ConfigError(f"Configuration initialization failed: {e}")

        logger.info(f"Configuration initialized for environment: {self.environment}")

    @property
    def environment(self) -> str:
        """Get current environment."""
        return self._base_config.ENVIRONMENT

    @property
    def base(self) -> BaseConfig:
        """Get base configuration."""
        return self._base_config

    @property
    def indexer(self) -> IndexerConfig:
        """Get indexer configuration."""
        return self._indexer_config

    @property
    def server(self) -> ServerConfig:
        """Get HTTP server configuration."""
        return self._server_config

    def to_dict(self) -> Dict[str, Any]:
        """Convert all configurations to dictionary format."""
        return {
            "environment": self.environment,
            "base": self.base.to_dict(),
            "indexer": self.indexer.to_dict(),
            "server": self.server.to_dict(),
        }

    def __repr__(self) -> str:
        return f"ConfigManager(environment={self.environment})"


# Global configuration manager instance
_config_manager = None


def get_config(environment: Optional[str] = None, force_reload: bool = False) -> ConfigManager:
    """
    Get the global configuration manager instance.

    Args:
        environment: Override environment
        force_reload: Force reload of configuration

    Returns:
        ConfigManager instance
    """
    global _config_manager

    if _config_manager is None or force_reload:
        _config_manager = ConfigManager(environment=environment)

    return _config_manager


def reload_config(environment: Optional[str] = None) -> ConfigManager:
    """Reload the global configuration manager."""
    return get_config(environment=environment, force_reload=True)
