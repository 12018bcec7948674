"""
Payload dispatch - Route tagged payload variants to their normalizer.

Callers wrap raw provider output in the variant matching the transport
it came from. Raw mappings are never inspected to guess their origin.
"""

from typing import Optional

from evm_normalization.config import NormalizerConfig
from evm_normalization.models import (
    AnyEVMTransaction,
    BlockPayload,
    EVMBlock,
    EVMNetwork,
    FungibleAsset,
    PolledBlockPayload,
    PolledTransactionPayload,
    SubscriptionBlockPayload,
    SubscriptionTransactionPayload,
    TransactionPayload,
)
from evm_normalization.normalizers.blocks import (
    block_from_polled_block,
    block_from_subscription_block,
)
from evm_normalization.normalizers.transactions import (
    tx_from_polled_tx,
    tx_from_subscription_tx,
)
from evm_normalization.value_decoders import TransferValueDecoder


def normalize_block(
    payload: BlockPayload,
    config: Optional[NormalizerConfig] = None,
) -> EVMBlock:
    """Normalize a block payload from either transport."""
    if isinstance(payload, PolledBlockPayload):
        return block_from_polled_block(payload.data, config)
    if isinstance(payload, SubscriptionBlockPayload):
        return block_from_subscription_block(payload.data, config)
    raise TypeError(f"Unsupported block payload {type(payload).__name__}")


def normalize_transaction(
    payload: TransactionPayload,
    asset: FungibleAsset,
    network: EVMNetwork,
    value_decoder: Optional[TransferValueDecoder] = None,
    config: Optional[NormalizerConfig] = None,
) -> AnyEVMTransaction:
    """Normalize a transaction payload from either transport."""
    if isinstance(payload, PolledTransactionPayload):
        return tx_from_polled_tx(payload.data, asset, network, value_decoder, config)
    if isinstance(payload, SubscriptionTransactionPayload):
        return tx_from_subscription_tx(payload.data, asset, network, config)
    raise TypeError(f"Unsupported transaction payload {type(payload).__name__}")
