"""
HTTP server configuration for dex-events.
"""

from dataclasses import dataclass, field

from .base import BaseConfig, ConfigError


@dataclass
class ServerConfig(BaseConfig):
    """aiohttp server settings."""

    API_HOST: str = field(default_factory=lambda: BaseConfig.get_env("API_HOST", "0.0.0.0"))
    API_PORT: int = field(default_factory=lambda: BaseConfig.get_env_int("API_PORT", 8080))
    API_ACCESS_LOG: bool = field(
        default_factory=lambda: BaseConfig.get_env_bool("API_ACCESS_LOG", True)
    )

    def _validate_config(self):
        super()._validate_config()
        if not 0 < self.API_PORT < 65536:
            raise ConfigError(f"API_PORT out of range: {self.API_PORT}")
