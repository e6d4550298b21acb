"""
dex-events: normalized liquidity-pool event feed over a squid GraphQL indexer.
"""

__version__ = "0.1.0"
