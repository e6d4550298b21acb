"""
Amount conversion helpers.
"""

from .base import MalformedActionError


def to_raw_int(raw_amount: str) -> int:
    """Parse an unsigned base-10 integer string as produced by the indexer."""
    if not isinstance(raw_amount, str) or not (raw_amount.isascii() and raw_amount.isdigit()):
        raise MalformedActionError(f"Invalid raw amount: {raw_amount!r}")
    return int(raw_amount)


def decimalize(raw_amount: str, decimals: int) -> float:
    """
    Convert a raw on-chain amount to a human-scale quantity.

    Args:
        raw_amount: Amount in the asset's smallest unit, as a digit string
        decimals: Decimal precision declared by the asset

    Returns:
        raw_amount / 10**decimals as a float
    """
    if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
        raise MalformedActionError(f"Invalid asset decimals: {decimals!r}")
    return to_raw_int(raw_amount) / 10 ** decimals
