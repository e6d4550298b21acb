"""
Base exceptions for the event normalization processors.
"""

import logging

logger = logging.getLogger(__name__)


class ProcessorError(Exception):
    """Base exception for processor errors."""
    pass


class ClassificationError(ProcessorError):
    """Raised when a raw action carries an unrecognized type tag."""

    def __init__(self, action_type: object, transaction: str = None):
        self.action_type = action_type
        self.transaction = transaction
        location = f" in transaction {transaction}" if transaction else ""
        super().__init__(f"Unrecognized action type {action_type!r}{location}")


class MalformedActionError(ProcessorError):
    """Raised when a raw action violates the indexer's action schema."""
    pass
