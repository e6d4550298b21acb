"""
Pytest configuration for the API tests.
"""

import pytest
from unittest.mock import AsyncMock, Mock

from dex_events.api import EventsPipeline
from dex_events.fetchers import BaseFetcher


@pytest.fixture
def mock_fetcher():
    """Indexer fetcher whose fetch_actions is an AsyncMock."""
    fetcher = Mock(spec=BaseFetcher)
    fetcher.fetch_actions = AsyncMock(return_value=[])
    return fetcher


@pytest.fixture
def pipeline(mock_fetcher):
    return EventsPipeline(mock_fetcher)
