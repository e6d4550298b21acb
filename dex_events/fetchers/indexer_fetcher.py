"""
GraphQL fetcher for the squid indexer serving pool actions.
"""

import asyncio
from typing import Any, Dict, List, Optional

import aiohttp

from .base import BaseFetcher, FetchError

ACTIONS_QUERY = """
query Actions($fromBlock: Int!, $toBlock: Int!) {
  actions(
    where: { blockNumber_gte: $fromBlock, blockNumber_lte: $toBlock }
    orderBy: [blockNumber_ASC, id_ASC]
  ) {
    pool { id }
    asset0 { id decimals }
    asset1 { id decimals }
    amount0In
    amount0Out
    amount1In
    amount1Out
    reserves0After
    reserves1After
    type
    transaction
    timestamp
    blockNumber
  }
}
"""


class IndexerFetcher(BaseFetcher):
    """
    Fetch raw pool actions from the squid GraphQL endpoint.

    One POST per call; retries are left to the caller.
    """

    def __init__(
        self,
        indexer_url: str,
        timeout: float = 30.0,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Initialize indexer fetcher.

        Args:
            indexer_url: GraphQL endpoint URL
            timeout: Total request timeout in seconds
            session: Shared client session; one is created lazily if omitted
        """
        super().__init__("sqd", indexer_url)
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session = session
        self._owns_session = session is None

    def validate_config(self) -> bool:
        if not self.endpoint_url or not self.endpoint_url.startswith(("http://", "https://")):
            self.logger.error(f"Invalid indexer URL: {self.endpoint_url!r}")
            return False
        return True

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def query(self, document: str, variables: Dict[str, Any]) -> Dict[str, Any]:
        """
        Execute a GraphQL document and return its ``data`` object.

        Raises:
            FetchError: transport error, timeout, non-2xx status or GraphQL errors
        """
        payload = {"query": document, "variables": variables}
        try:
            async with self._get_session().post(
                self.endpoint_url, json=payload, timeout=self.timeout
            ) as response:
                if response.status >= 300:
                    text = await response.text()
                    raise FetchError(
                        f"Indexer returned HTTP {response.status}: {text[:200]}"
                    )
                body = await response.json(content_type=None)
        except asyncio.TimeoutError as e:
            raise FetchError(f"Indexer request timed out after {self.timeout.total}s") from e
        except aiohttp.ClientError as e:
            raise FetchError(f"Indexer request failed: {e}") from e
        except ValueError as e:
            raise FetchError(f"Indexer returned invalid JSON: {e}") from e

        if not isinstance(body, dict):
            raise FetchError(f"Unexpected indexer response: {type(body).__name__}")

        errors = body.get("errors")
        if errors:
            messages = "; ".join(
                str(err.get("message", err)) if isinstance(err, dict) else str(err)
                for err in errors
            )
            raise FetchError(f"Indexer query failed: {messages}")

        data = body.get("data")
        if not isinstance(data, dict):
            raise FetchError("Indexer response has no data object")
        return data

    async def fetch_actions(self, from_block: int, to_block: int) -> List[Dict[str, Any]]:
        self.logger.info(f"Fetching pool actions for blocks {from_block}-{to_block}")

        data = await self.query(
            ACTIONS_QUERY, {"fromBlock": from_block, "toBlock": to_block}
        )

        actions = data.get("actions")
        if not isinstance(actions, list):
            raise FetchError("Indexer response is missing the actions list")

        self.logger.info(f"Fetched {len(actions)} actions ({from_block}-{to_block})")
        return actions
