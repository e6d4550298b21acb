"""Test configuration for fetchers."""
import pytest
from unittest.mock import AsyncMock, MagicMock, Mock


@pytest.fixture
def mock_session():
    """Mock aiohttp.ClientSession whose post() yields a configurable response."""

    def _mock_session(body=None, status=200, text=""):
        response = Mock()
        response.status = status
        response.json = AsyncMock(return_value=body)
        response.text = AsyncMock(return_value=text)

        session = MagicMock()
        session.closed = False
        session.close = AsyncMock()
        session.post.return_value.__aenter__.return_value = response
        return session

    return _mock_session
