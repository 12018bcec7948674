"""
EVM Normalization Package - Canonical blocks and transactions.

Converts payloads from a polling provider (web3) and a subscription
provider (hex-encoded JSON) into one canonical representation for the
wallet. Pure transforms only: no fetching, retries or caching.

Quick Start:
    from evm_normalization import (
        ETH,
        ETHEREUM,
        PolledTransactionPayload,
        SignedEVMTransaction,
        normalize_transaction,
        provider_tx_from_signed_tx,
    )

    tx = normalize_transaction(
        PolledTransactionPayload(w3.eth.get_transaction(tx_hash)),
        asset=ETH,
        network=ETHEREUM,
    )

    if isinstance(tx, SignedEVMTransaction):
        provider_tx = provider_tx_from_signed_tx(tx)

Errors:
- MalformedInputError: required field missing or wrong shape
- UnsupportedTransactionTypeError: type other than 0, 1, 2
- NumericOverflowError: value outside its field's range
- AssetValueDecodeError: token amount not recoverable from call data
"""

from evm_normalization.config import NormalizerConfig, get_config, set_config
from evm_normalization.constants import (
    DEFAULT_TRANSACTION_TYPE,
    ETH,
    ETHEREUM,
    MAX_SAFE_INTEGER,
    MAX_UINT256,
)
from evm_normalization.exceptions import (
    AssetValueDecodeError,
    ConfigurationError,
    MalformedInputError,
    NormalizationError,
    NumericOverflowError,
    UnsupportedTransactionTypeError,
)
from evm_normalization.models import (
    AnyEVMTransaction,
    EVMBlock,
    EVMNetwork,
    EVMTransaction,
    FungibleAsset,
    PayloadSource,
    PolledBlockPayload,
    PolledTransactionPayload,
    ProviderNetwork,
    ProviderTransaction,
    SignedEVMTransaction,
    SmartContractFungibleAsset,
    SubscriptionBlockPayload,
    SubscriptionTransactionPayload,
    TransactionType,
)
from evm_normalization.normalizers import (
    block_from_polled_block,
    block_from_subscription_block,
    normalize_block,
    normalize_transaction,
    provider_network_from_network,
    provider_tx_from_signed_tx,
    tx_from_polled_tx,
    tx_from_subscription_tx,
)
from evm_normalization.value_decoders import (
    FixedOffsetTransferValueDecoder,
    TransferValueDecoder,
)


__version__ = "1.0.0"

__all__ = [
    # Config
    "NormalizerConfig",
    "get_config",
    "set_config",

    # Constants
    "DEFAULT_TRANSACTION_TYPE",
    "ETH",
    "ETHEREUM",
    "MAX_SAFE_INTEGER",
    "MAX_UINT256",

    # Exceptions
    "NormalizationError",
    "MalformedInputError",
    "UnsupportedTransactionTypeError",
    "NumericOverflowError",
    "AssetValueDecodeError",
    "ConfigurationError",

    # Models
    "AnyEVMTransaction",
    "EVMBlock",
    "EVMNetwork",
    "EVMTransaction",
    "FungibleAsset",
    "PayloadSource",
    "PolledBlockPayload",
    "PolledTransactionPayload",
    "ProviderNetwork",
    "ProviderTransaction",
    "SignedEVMTransaction",
    "SmartContractFungibleAsset",
    "SubscriptionBlockPayload",
    "SubscriptionTransactionPayload",
    "TransactionType",

    # Normalizers
    "block_from_polled_block",
    "block_from_subscription_block",
    "normalize_block",
    "normalize_transaction",
    "provider_network_from_network",
    "provider_tx_from_signed_tx",
    "tx_from_polled_tx",
    "tx_from_subscription_tx",

    # Value decoders
    "FixedOffsetTransferValueDecoder",
    "TransferValueDecoder",
]
