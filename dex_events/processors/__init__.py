"""
Event normalization processors.

KISS: small, pure steps (decimalize, classify, index) composed by EventNormalizer.
"""

from .amounts import decimalize
from .base import ClassificationError, MalformedActionError, ProcessorError
from .classifier import ActionType, EventType, SwapDirection, classify_action, resolve_swap_direction
from .event_processor import EventNormalizer
from .indexing import EventPosition, assign_indices
from .models import (
    EventsResponse,
    JoinExitEvent,
    NormalizedEvent,
    RawAction,
    SwapEvent,
)

__all__ = [
    "ActionType",
    "ClassificationError",
    "EventNormalizer",
    "EventPosition",
    "EventType",
    "EventsResponse",
    "JoinExitEvent",
    "MalformedActionError",
    "NormalizedEvent",
    "ProcessorError",
    "RawAction",
    "SwapDirection",
    "SwapEvent",
    "assign_indices",
    "classify_action",
    "decimalize",
    "resolve_swap_direction",
]
