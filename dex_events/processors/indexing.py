"""
Positional indices for normalized events.

Indices are derived from the order in which the indexer returned the
actions and are keyed by transaction id only: ``eventIndex`` counts actions
within one transaction and ``txnIndex`` counts the contiguous runs of that
transaction's actions. Both start at 0 for every new transaction id.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from .models import RawAction


@dataclass(frozen=True)
class EventPosition:
    txn_index: int
    event_index: int


def assign_indices(actions: Sequence[RawAction]) -> List[EventPosition]:
    """
    Compute one EventPosition per action, in input order.

    The counter tables are local to the call.
    """
    events_per_txn: Dict[str, int] = {}
    runs_per_txn: Dict[str, int] = {}
    previous: Optional[str] = None
    positions = []

    for action in actions:
        txn = action.transaction
        if txn != previous:
            # A transaction seen again after another one starts a new run
            runs_per_txn[txn] = runs_per_txn.get(txn, -1) + 1
            previous = txn

        event_index = events_per_txn.get(txn, 0)
        events_per_txn[txn] = event_index + 1

        positions.append(
            EventPosition(txn_index=runs_per_txn[txn], event_index=event_index)
        )

    return positions
