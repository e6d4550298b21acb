"""
Shared pytest fixtures: raw indexer actions.
"""

import copy

import pytest

REFERENCE_ACTIONS = [
    {
        "pool": {"id": "pool1"},
        "asset0": {"id": "asset0", "decimals": 6},
        "asset1": {"id": "asset1", "decimals": 9},
        "amount1Out": "1000",
        "amount1In": "0",
        "amount0Out": "0",
        "amount0In": "500",
        "reserves0After": "1000",
        "reserves1After": "2001",
        "type": "ADD_LIQUIDITY",
        "transaction": "txn1",
        "timestamp": 1234567890,
        "blockNumber": 1,
    },
    {
        "pool": {"id": "pool2"},
        "asset0": {"id": "asset0", "decimals": 9},
        "asset1": {"id": "asset1", "decimals": 9},
        "amount1Out": "1001",
        "amount1In": "0",
        "amount0Out": "0",
        "amount0In": "300",
        "reserves0After": "2000",
        "reserves1After": "4000",
        "type": "SWAP",
        "transaction": "txn2",
        "timestamp": 1234567891,
        "blockNumber": 2,
    },
]


@pytest.fixture
def reference_actions():
    """The two raw actions of the reference block range 100-200."""
    return copy.deepcopy(REFERENCE_ACTIONS)


@pytest.fixture
def make_action():
    """Factory for raw action dicts with sensible defaults."""

    def _make_action(**overrides):
        action = {
            "pool": {"id": "0xpool"},
            "asset0": {"id": "0xasset0", "decimals": 18},
            "asset1": {"id": "0xasset1", "decimals": 6},
            "amount0In": "0",
            "amount0Out": "0",
            "amount1In": "0",
            "amount1Out": "0",
            "reserves0After": "0",
            "reserves1After": "0",
            "type": "SWAP",
            "transaction": "0xtxn",
            "timestamp": 1700000000,
            "blockNumber": 100,
        }
        action.update(overrides)
        return action

    return _make_action
