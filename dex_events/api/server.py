"""
HTTP API for normalized pool events.

Routes:
    GET /api/events?fromBlock=<int>&toBlock=<int>
    GET /health
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

import aiohttp
import ujson
from aiohttp import web

from ..config import ConfigError, ConfigManager
from ..fetchers.base import BaseFetcher
from ..fetchers.indexer_fetcher import IndexerFetcher
from .pipeline import EventsPipeline

logger = logging.getLogger(__name__)

SERVICE_NAME = "dex-events"
PIPELINE_KEY = web.AppKey("pipeline", EventsPipeline)


def json_response(data: Any, status: int = 200) -> web.Response:
    """Create JSON response."""
    return web.json_response(data, status=status, dumps=ujson.dumps)


class EventsAPI:
    """Request handlers; the pipeline is looked up on the application."""

    async def get_events(self, request: web.Request) -> web.Response:
        """
        GET /api/events

        Normalized pool events for an inclusive block range.
        """
        pipeline = request.app[PIPELINE_KEY]
        result = await pipeline.handle(
            request.query.get("fromBlock"),
            request.query.get("toBlock"),
        )
        return json_response(result.body, status=result.status)

    async def health(self, request: web.Request) -> web.Response:
        """GET /health"""
        return json_response({
            "status": "ok",
            "service": SERVICE_NAME,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        })


def create_app(
    pipeline: Optional[EventsPipeline] = None,
    config: Optional[ConfigManager] = None,
) -> web.Application:
    """
    Create the aiohttp application.

    Args:
        pipeline: Pre-built pipeline (tests); built from config when omitted
        config: Configuration used to build the indexer fetcher

    Returns:
        aiohttp Application with all routes configured
    """
    api = EventsAPI()
    app = web.Application()

    if pipeline is not None:
        app[PIPELINE_KEY] = pipeline
    else:
        app.cleanup_ctx.append(_indexer_context(config or ConfigManager()))

    app.router.add_get("/api/events", api.get_events)
    app.router.add_get("/health", api.health)

    return app


def _indexer_context(config: ConfigManager):
    async def indexer_context(app: web.Application):
        session = aiohttp.ClientSession()
        fetcher: BaseFetcher = IndexerFetcher(
            session=session, **config.indexer.get_fetcher_kwargs()
        )
        if not fetcher.validate_config():
            await session.close()
            raise ConfigError(f"Invalid indexer configuration: {fetcher.endpoint_url}")

        logger.info(f"Using indexer at {fetcher.endpoint_url}")
        app[PIPELINE_KEY] = EventsPipeline(fetcher)
        try:
            yield
        finally:
            await session.close()

    return indexer_context


def run_server(config: Optional[ConfigManager] = None, host: Optional[str] = None,
               port: Optional[int] = None) -> None:
    """Run the API until interrupted."""
    config = config or ConfigManager()
    host = host or config.server.API_HOST
    port = port or config.server.API_PORT

    logger.info(f"Starting {SERVICE_NAME} API on {host}:{port} ({config.environment})")
    web.run_app(
        create_app(config=config),
        host=host,
        port=port,
        access_log=logger if config.server.API_ACCESS_LOG else None,
        print=None,
    )
