"""
Configuration management for dex-events.

Example:
    from dex_events.config import get_config

    config = get_config()
    indexer_url = config.indexer.indexer_url
    port = config.server.API_PORT
"""

from .base import BaseConfig, ConfigError
from .indexer import IndexerConfig
from .manager import ConfigManager, get_config, reload_config
from .server import ServerConfig

__all__ = [
    "BaseConfig",
    "ConfigError",
    "IndexerConfig",
    "ServerConfig",
    "ConfigManager",
    "get_config",
    "reload_config",
]
