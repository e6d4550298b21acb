"""
HTTP-facing layer: range validation, the events pipeline and the aiohttp app.
"""

from .pipeline import EventsPipeline, PipelineResult, UpstreamFailure, UPSTREAM_FAILURE_MESSAGE
from .validation import BlockRange, MISSING_RANGE_MESSAGE, RangeValidationError, validate_block_range
from .server import create_app, run_server

__all__ = [
    "BlockRange",
    "EventsPipeline",
    "MISSING_RANGE_MESSAGE",
    "PipelineResult",
    "RangeValidationError",
    "UPSTREAM_FAILURE_MESSAGE",
    "UpstreamFailure",
    "create_app",
    "run_server",
    "validate_block_range",
]
