"""
Normalizers package - Block, transaction and network conversions.
"""

from evm_normalization.normalizers.blocks import (
    block_from_polled_block,
    block_from_subscription_block,
)
from evm_normalization.normalizers.dispatch import (
    normalize_block,
    normalize_transaction,
)
from evm_normalization.normalizers.networks import (
    parse_chain_id,
    provider_network_from_network,
)
from evm_normalization.normalizers.transactions import (
    provider_tx_from_signed_tx,
    tx_from_polled_tx,
    tx_from_subscription_tx,
)


__all__ = [
    "block_from_polled_block",
    "block_from_subscription_block",
    "normalize_block",
    "normalize_transaction",
    "parse_chain_id",
    "provider_network_from_network",
    "provider_tx_from_signed_tx",
    "tx_from_polled_tx",
    "tx_from_subscription_tx",
]
