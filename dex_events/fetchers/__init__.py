"""
Indexer data fetchers.
"""

from .base import BaseFetcher, FetchError
from .indexer_fetcher import ACTIONS_QUERY, IndexerFetcher

__all__ = [
    "ACTIONS_QUERY",
    "BaseFetcher",
    "FetchError",
    "IndexerFetcher",
]
