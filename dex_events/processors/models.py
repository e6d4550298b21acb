"""
Pydantic models for raw indexer actions and normalized pool events.

Field names follow the wire format (camelCase) on both sides so that models
can be validated from, and dumped to, JSON without aliases.
"""

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


# Raw indexer models


class PoolRef(FrozenModel):
    id: str


class AssetRef(FrozenModel):
    id: str
    decimals: int = Field(ge=0)


class RawAction(FrozenModel):
    """One indexer-reported pool operation prior to normalization."""

    pool: PoolRef
    asset0: AssetRef
    asset1: AssetRef
    amount0In: str
    amount0Out: str
    amount1In: str
    amount1Out: str
    reserves0After: str
    reserves1After: str
    type: str
    transaction: str
    timestamp: int
    blockNumber: int = Field(ge=0)

    @field_validator(
        "amount0In",
        "amount0Out",
        "amount1In",
        "amount1Out",
        "reserves0After",
        "reserves1After",
    )
    @classmethod
    def check_digit_string(cls, value: str) -> str:
        if not (value.isascii() and value.isdigit()):
            raise ValueError(f"expected an unsigned base-10 integer string, got {value!r}")
        return value


# Normalized event models


class Block(FrozenModel):
    blockNumber: int
    blockTimestamp: int


class Reserves(FrozenModel):
    asset0: float
    asset1: float


class PoolEvent(FrozenModel):
    block: Block
    txnId: str
    txnIndex: int
    eventIndex: int
    maker: str
    pairId: str
    reserves: Reserves

    def to_payload(self) -> dict:
        """JSON-ready dict without the swap legs that do not apply."""
        return self.model_dump(exclude_none=True)


class JoinExitEvent(PoolEvent):
    eventType: Literal["join", "exit"]
    amount0: float
    amount1: float


class SwapEvent(PoolEvent):
    eventType: Literal["swap"] = "swap"
    asset0In: Optional[float] = None
    asset1In: Optional[float] = None
    asset0Out: Optional[float] = None
    asset1Out: Optional[float] = None
    priceNative: float


NormalizedEvent = Union[JoinExitEvent, SwapEvent]


class EventsResponse(BaseModel):
    events: List[Union[SwapEvent, JoinExitEvent]]

    def to_payload(self) -> dict:
        return {"events": [event.to_payload() for event in self.events]}
