"""
Validation of the requested block range.
"""

from dataclasses import dataclass
from typing import Optional

MISSING_RANGE_MESSAGE = "Both 'fromBlock' and 'toBlock' are required"


class RangeValidationError(Exception):
    """Raised when the block range query parameters are missing or unusable."""

    def __init__(self, message: str = MISSING_RANGE_MESSAGE):
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class BlockRange:
    from_block: int
    to_block: int


def _parse_block(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    text = str(value).strip()
    # Anything but unsigned ASCII digits is handled like a missing parameter
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)


def validate_block_range(from_block: Optional[str], to_block: Optional[str]) -> BlockRange:
    """
    Parse the ``fromBlock``/``toBlock`` query parameters.

    Raises:
        RangeValidationError: if either parameter is absent or not an integer
    """
    parsed_from = _parse_block(from_block)
    parsed_to = _parse_block(to_block)
    if parsed_from is None or parsed_to is None:
        raise RangeValidationError()
    return BlockRange(from_block=parsed_from, to_block=parsed_to)
