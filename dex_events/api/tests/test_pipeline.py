"""
Tests for the events pipeline state machine.
"""

import pytest

from dex_events.api import EventsPipeline, PipelineResult, RangeValidationError, UpstreamFailure
from dex_events.fetchers import FetchError
from dex_events.processors import ClassificationError, EventNormalizer

MISSING = {"error": "Both 'fromBlock' and 'toBlock' are required"}
FAILED = {"error": "Failed to fetch events data"}


class TestHandle:

    @pytest.mark.asyncio
    async def test_reference_range(self, pipeline, mock_fetcher, reference_actions):
        mock_fetcher.fetch_actions.return_value = reference_actions

        result = await pipeline.handle("100", "200")

        assert result.status == 200
        mock_fetcher.fetch_actions.assert_awaited_once_with(100, 200)

        join, swap = result.body["events"]
        assert join["eventType"] == "join"
        assert join["maker"] == join["pairId"] == "pool1"
        assert (join["txnIndex"], join["eventIndex"]) == (0, 0)
        assert swap["eventType"] == "swap"
        assert swap["maker"] == swap["pairId"] == "pool2"
        assert (swap["txnIndex"], swap["eventIndex"]) == (0, 0)
        assert swap["priceNative"] == 0.2997002997002997

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "from_block,to_block",
        [("100", None), (None, "200"), (None, None), ("abc", "200")],
    )
    async def test_bad_request(self, pipeline, mock_fetcher, from_block, to_block):
        result = await pipeline.handle(from_block, to_block)

        assert result == PipelineResult(status=400, body=MISSING)
        mock_fetcher.fetch_actions.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_actions(self, pipeline):
        result = await pipeline.handle("100", "200")
        assert result == PipelineResult(status=200, body={"events": []})

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [FetchError("Network error"), RuntimeError("Network error"), TimeoutError()],
    )
    async def test_fetch_failure(self, pipeline, mock_fetcher, error):
        mock_fetcher.fetch_actions.side_effect = error

        result = await pipeline.handle("100", "200")

        assert result == PipelineResult(status=500, body=FAILED)

    @pytest.mark.asyncio
    async def test_unrecognized_action_fails_whole_request(
        self, pipeline, mock_fetcher, reference_actions, make_action
    ):
        mock_fetcher.fetch_actions.return_value = reference_actions + [make_action(type="SYNC")]

        result = await pipeline.handle("100", "200")

        assert result == PipelineResult(status=500, body=FAILED)

    @pytest.mark.asyncio
    async def test_malformed_swap_fails_whole_request(self, pipeline, mock_fetcher, make_action):
        mock_fetcher.fetch_actions.return_value = [
            make_action(amount0In="1", amount1In="1", amount0Out="1")
        ]

        result = await pipeline.handle("100", "200")

        assert result.status == 500
        assert result.body == FAILED


class TestGetEvents:

    @pytest.mark.asyncio
    async def test_returns_payload(self, pipeline, mock_fetcher, reference_actions):
        mock_fetcher.fetch_actions.return_value = reference_actions

        payload = await pipeline.get_events("100", "200")

        assert [e["eventType"] for e in payload["events"]] == ["join", "swap"]

    @pytest.mark.asyncio
    async def test_raises_validation_error(self, pipeline):
        with pytest.raises(RangeValidationError):
            await pipeline.get_events(None, "200")

    @pytest.mark.asyncio
    async def test_wraps_cause(self, pipeline, mock_fetcher, make_action):
        mock_fetcher.fetch_actions.return_value = [make_action(type="MINT")]

        with pytest.raises(UpstreamFailure) as exc_info:
            await pipeline.get_events("1", "2")

        assert isinstance(exc_info.value.cause, ClassificationError)
        assert exc_info.value.message == "Failed to fetch events data"

    def test_default_normalizer(self, mock_fetcher):
        assert isinstance(EventsPipeline(mock_fetcher).normalizer, EventNormalizer)
