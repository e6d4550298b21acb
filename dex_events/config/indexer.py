"""
Indexer (GraphQL) configuration for dex-events.
"""

from dataclasses import dataclass, field
from typing import Dict

from .base import BaseConfig, ConfigError

DEFAULT_LOCAL_INDEXER_URL = "http://localhost:4350/graphql"


@dataclass
class IndexerConfig(BaseConfig):
    """Squid indexer endpoint settings."""

    SQD_INDEXER_URL: str = field(
        default_factory=lambda: BaseConfig.get_env("SQD_INDEXER_URL")
    )
    INDEXER_TIMEOUT_SECONDS: float = field(
        default_factory=lambda: BaseConfig.get_env_float("INDEXER_TIMEOUT_SECONDS", 30.0)
    )

    def _validate_config(self):
        super()._validate_config()

        if not self.SQD_INDEXER_URL:
            if not self.is_local:
                raise ConfigError(
                    f"SQD_INDEXER_URL must be set in the {self.ENVIRONMENT} environment"
                )
            self.SQD_INDEXER_URL = DEFAULT_LOCAL_INDEXER_URL

        if not self.SQD_INDEXER_URL.startswith(("http://", "https://")):
            raise ConfigError(f"Invalid indexer URL: {self.SQD_INDEXER_URL}")

        if self.INDEXER_TIMEOUT_SECONDS <= 0:
            raise ConfigError(
                f"INDEXER_TIMEOUT_SECONDS must be positive, got: {self.INDEXER_TIMEOUT_SECONDS}"
            )

    @property
    def indexer_url(self) -> str:
        return self.SQD_INDEXER_URL

    def get_fetcher_kwargs(self) -> Dict[str, object]:
        """Keyword arguments for IndexerFetcher."""
        return {
            "indexer_url": self.SQD_INDEXER_URL,
            "timeout": self.INDEXER_TIMEOUT_SECONDS,
        }
