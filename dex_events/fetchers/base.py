"""
Base classes for indexer data fetchers.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List
import logging

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Base exception for fetch-related errors."""
    pass


class BaseFetcher(ABC):
    """
    Abstract base class for pool action fetchers.

    KISS principle: each fetcher talks to one data source.
    """

    def __init__(self, source: str, endpoint_url: str):
        """
        Initialize fetcher.

        Args:
            source: Data source name (e.g., 'sqd')
            endpoint_url: Endpoint URL of the data source
        """
        self.source = source
        self.endpoint_url = endpoint_url
        self.logger = logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")

    @abstractmethod
    async def fetch_actions(self, from_block: int, to_block: int) -> List[Dict[str, Any]]:
        """
        Fetch raw pool actions for an inclusive block range.

        Args:
            from_block: First block of the range
            to_block: Last block of the range

        Returns:
            Raw action records in indexer order

        Raises:
            FetchError: on any transport or protocol failure
        """
        pass

    @abstractmethod
    def validate_config(self) -> bool:
        """
        Validate fetcher configuration.

        Returns:
            bool: True if configuration is valid
        """
        pass

    async def close(self) -> None:
        """Release any resources held by the fetcher."""
        pass
