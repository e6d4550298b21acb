"""
Normalization of raw indexer actions into join/exit/swap pool events.
"""

import logging
from typing import Any, Dict, Iterable, List, Union

import pydantic

from .amounts import decimalize, to_raw_int
from .base import MalformedActionError
from .classifier import EventType, classify_action, resolve_swap_direction
from .indexing import EventPosition, assign_indices
from .models import (
    Block,
    JoinExitEvent,
    NormalizedEvent,
    RawAction,
    Reserves,
    SwapEvent,
)

logger = logging.getLogger(__name__)


class EventNormalizer:
    """
    Turn raw pool actions into normalized events.

    Stateless: every call works only on its arguments, so one instance can be
    shared between requests.
    """

    def __init__(self):
        self.logger = logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")

    def normalize(self, action: RawAction, position: EventPosition) -> NormalizedEvent:
        """
        Normalize a single action.

        Args:
            action: Parsed raw action
            position: Indices computed by assign_indices for this action

        Returns:
            JoinExitEvent or SwapEvent

        Raises:
            ClassificationError: unrecognized action type
            MalformedActionError: amounts that do not fit the action type
        """
        event_type = classify_action(action)
        decimals = (action.asset0.decimals, action.asset1.decimals)

        common = {
            "block": Block(
                blockNumber=action.blockNumber,
                blockTimestamp=action.timestamp,
            ),
            "txnId": action.transaction,
            "txnIndex": position.txn_index,
            "eventIndex": position.event_index,
            "maker": action.pool.id,
            "pairId": action.pool.id,
            "reserves": Reserves(
                asset0=decimalize(action.reserves0After, decimals[0]),
                asset1=decimalize(action.reserves1After, decimals[1]),
            ),
        }

        if event_type is EventType.SWAP:
            direction = resolve_swap_direction(action)
            asset_in, asset_out = direction.asset_in, direction.asset_out
            legs = {
                f"asset{asset_in}In": decimalize(
                    getattr(action, f"amount{asset_in}In"), decimals[asset_in]
                ),
                f"asset{asset_out}Out": decimalize(
                    getattr(action, f"amount{asset_out}Out"), decimals[asset_out]
                ),
            }
            return SwapEvent(priceNative=direction.price_native, **common, **legs)

        return JoinExitEvent(
            eventType=event_type.value,
            amount0=self._net_amount(action.amount0In, action.amount0Out, decimals[0]),
            amount1=self._net_amount(action.amount1In, action.amount1Out, decimals[1]),
            **common,
        )

    @staticmethod
    def _net_amount(amount_in: str, amount_out: str, decimals: int) -> float:
        net = abs(to_raw_int(amount_in) - to_raw_int(amount_out))
        return decimalize(str(net), decimals)

    def parse_action(self, raw: Union[RawAction, Dict[str, Any]]) -> RawAction:
        """Validate one raw indexer record into a RawAction."""
        if isinstance(raw, RawAction):
            return raw
        try:
            return RawAction.model_validate(raw)
        except pydantic.ValidationError as e:
            raise MalformedActionError(f"Invalid action record: {e}") from e

    def normalize_actions(
        self, raw_actions: Iterable[Union[RawAction, Dict[str, Any]]]
    ) -> List[NormalizedEvent]:
        """
        Normalize an ordered list of indexer actions.

        Indices are computed on the original order before any action is
        normalized. The first failure aborts the whole batch.
        """
        actions = [self.parse_action(raw) for raw in raw_actions]
        positions = assign_indices(actions)

        events = []
        for action, position in zip(actions, positions):
            event = self.normalize(action, position)
            self.logger.debug(
                f"Normalized {action.type} in {action.transaction} "
                f"(txnIndex={position.txn_index}, eventIndex={position.event_index})"
            )
            events.append(event)

        return events
