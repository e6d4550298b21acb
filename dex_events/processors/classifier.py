"""
Classification of raw indexer actions into canonical event types.
"""

from dataclasses import dataclass
from enum import Enum

from .amounts import to_raw_int
from .base import ClassificationError, MalformedActionError
from .models import RawAction


class ActionType(str, Enum):
    """Action type tags emitted by the indexer."""

    ADD_LIQUIDITY = "ADD_LIQUIDITY"
    REMOVE_LIQUIDITY = "REMOVE_LIQUIDITY"
    SWAP = "SWAP"


class EventType(str, Enum):
    """Canonical normalized event types."""

    JOIN = "join"
    EXIT = "exit"
    SWAP = "swap"


ACTION_EVENT_TYPES = {
    ActionType.ADD_LIQUIDITY: EventType.JOIN,
    ActionType.REMOVE_LIQUIDITY: EventType.EXIT,
    ActionType.SWAP: EventType.SWAP,
}


@dataclass(frozen=True)
class SwapDirection:
    """Inbound and outbound legs of a swap, by asset position (0 or 1)."""

    asset_in: int
    asset_out: int
    amount_in: int
    amount_out: int

    @property
    def price_native(self) -> float:
        # Ratio of raw amounts, independent of either asset's decimals
        return self.amount_in / self.amount_out


def parse_action_type(value: object, transaction: str = None) -> ActionType:
    try:
        return ActionType(value)
    except ValueError:
        raise ClassificationError(value, transaction) from None


def classify_action(action: RawAction) -> EventType:
    """Map a raw action's type tag to its normalized event type."""
    return ACTION_EVENT_TYPES[parse_action_type(action.type, action.transaction)]


def _single_nonzero_leg(amount0: str, amount1: str, side: str, action: RawAction):
    raw0, raw1 = to_raw_int(amount0), to_raw_int(amount1)
    if (raw0 == 0) == (raw1 == 0):
        raise MalformedActionError(
            f"Swap in transaction {action.transaction} on pool {action.pool.id} "
            f"must have exactly one nonzero {side} leg "
            f"(amount0{side}={amount0}, amount1{side}={amount1})"
        )
    return (0, raw0) if raw0 else (1, raw1)


def resolve_swap_direction(action: RawAction) -> SwapDirection:
    """
    Determine which asset a swap takes in and which it pays out.

    Raises:
        MalformedActionError: if either side does not have exactly one
            nonzero leg, or both legs refer to the same asset
    """
    asset_in, amount_in = _single_nonzero_leg(action.amount0In, action.amount1In, "In", action)
    asset_out, amount_out = _single_nonzero_leg(action.amount0Out, action.amount1Out, "Out", action)

    if asset_in == asset_out:
        raise MalformedActionError(
            f"Swap in transaction {action.transaction} on pool {action.pool.id} "
            f"takes in and pays out the same asset (asset{asset_in})"
        )

    return SwapDirection(
        asset_in=asset_in,
        asset_out=asset_out,
        amount_in=amount_in,
        amount_out=amount_out,
    )
