"""
Events pipeline: validate range, fetch actions, normalize, respond.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..fetchers.base import BaseFetcher
from ..processors.event_processor import EventNormalizer
from ..processors.models import EventsResponse
from .validation import RangeValidationError, validate_block_range

logger = logging.getLogger(__name__)

UPSTREAM_FAILURE_MESSAGE = "Failed to fetch events data"


class UpstreamFailure(Exception):
    """Fetching or normalizing the indexer's actions failed."""

    def __init__(self, message: str = UPSTREAM_FAILURE_MESSAGE, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


@dataclass
class PipelineResult:
    """HTTP-shaped outcome of one pipeline run."""
    status: int
    body: Dict[str, Any] = field(default_factory=dict)


class EventsPipeline:
    """
    Single-pass request pipeline over one block range.

    The fetcher is injected so the pipeline never reads configuration.
    """

    def __init__(self, fetcher: BaseFetcher, normalizer: Optional[EventNormalizer] = None):
        self.fetcher = fetcher
        self.normalizer = normalizer or EventNormalizer()
        self.logger = logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")

    async def get_events(self, from_block: Optional[str], to_block: Optional[str]) -> Dict[str, List[dict]]:
        """
        Run the pipeline and return the ``{"events": [...]}`` payload.

        Raises:
            RangeValidationError: missing or non-numeric range parameter
            UpstreamFailure: indexer failure or an action that cannot be normalized
        """
        block_range = validate_block_range(from_block, to_block)

        try:
            raw_actions = await self.fetcher.fetch_actions(
                block_range.from_block, block_range.to_block
            )
            events = self.normalizer.normalize_actions(raw_actions)
        except Exception as e:
            raise UpstreamFailure(cause=e) from e

        self.logger.info(
            f"Normalized {len(events)} events for blocks "
            f"{block_range.from_block}-{block_range.to_block}"
        )
        return EventsResponse(events=events).to_payload()

    async def handle(self, from_block: Optional[str], to_block: Optional[str]) -> PipelineResult:
        """Run the pipeline and map failures to status codes."""
        try:
            payload = await self.get_events(from_block, to_block)
        except RangeValidationError as e:
            self.logger.warning(
                f"Rejected events request (fromBlock={from_block!r}, toBlock={to_block!r})"
            )
            return PipelineResult(status=400, body={"error": e.message})
        except UpstreamFailure as e:
            self.logger.error(
                f"Events request failed (fromBlock={from_block}, toBlock={to_block}): "
                f"{type(e.cause).__name__}: {e.cause}"
            )
            return PipelineResult(status=500, body={"error": e.message})

        return PipelineResult(status=200, body=payload)
