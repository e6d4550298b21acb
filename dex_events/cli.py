#!/usr/bin/env python3
"""
Command-line interface for dex-events.

Usage:
    python -m dex_events.cli serve --port 8080
    python -m dex_events.cli events --from-block 100 --to-block 200 --pretty
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

import ujson

from .api.pipeline import EventsPipeline, UpstreamFailure
from .api.server import run_server
from .api.validation import RangeValidationError
from .config import ConfigError, get_config
from .fetchers.indexer_fetcher import IndexerFetcher

logger = logging.getLogger(__name__)


async def dump_events(from_block: str, to_block: str, pretty: bool = False) -> int:
    """Run the events pipeline once and print the payload to stdout."""
    config = get_config()
    fetcher = IndexerFetcher(**config.indexer.get_fetcher_kwargs())
    pipeline = EventsPipeline(fetcher)

    try:
        payload = await pipeline.get_events(from_block, to_block)
    except RangeValidationError as e:
        logger.error(e.message)
        return 2
    except UpstreamFailure as e:
        logger.error(f"{e.message}: {e.cause}")
        return 1
    finally:
        await fetcher.close()

    print(ujson.dumps(payload, indent=2 if pretty else 0))
    logger.info(f"📊 {len(payload['events'])} events for blocks {from_block}-{to_block}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dex-events",
        description="Normalized liquidity-pool events from a squid indexer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", help="Bind address (default: API_HOST)")
    serve.add_argument("--port", type=int, help="Port (default: API_PORT)")

    events = subparsers.add_parser("events", help="Print events for a block range")
    events.add_argument("--from-block", required=True, help="First block (inclusive)")
    events.add_argument("--to-block", required=True, help="Last block (inclusive)")
    events.add_argument("--pretty", action="store_true", help="Indent JSON output")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = get_config()
    except ConfigError as e:
        logger.error(f"❌ {e}")
        return 1

    if args.command == "serve":
        run_server(config, host=args.host, port=args.port)
        return 0

    return asyncio.run(dump_events(args.from_block, args.to_block, pretty=args.pretty))


if __name__ == "__main__":
    sys.exit(main())
