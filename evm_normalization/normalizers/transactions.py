"""
Transaction Normalizer - Provider transactions to canonical transactions.

Directions:
- polling provider (web3 TxData)      -> EVMTransaction | SignedEVMTransaction
- subscription provider (hex strings) -> EVMTransaction
- SignedEVMTransaction                -> ProviderTransaction (for broadcast)
"""

import logging
from typing import Any, Mapping, Optional

from web3 import Web3
from web3.types import Wei

from evm_normalization.config import NormalizerConfig, get_config
from evm_normalization.constants import SUPPORTED_TRANSACTION_TYPES
from evm_normalization.exceptions import (
    MalformedInputError,
    UnsupportedTransactionTypeError,
)
from evm_normalization.models import (
    AnyEVMTransaction,
    EVMNetwork,
    EVMTransaction,
    FungibleAsset,
    PayloadSource,
    ProviderTransaction,
    SignedEVMTransaction,
    TransactionType,
)
from evm_normalization.normalizers.networks import parse_chain_id
from evm_normalization.quantities import (
    parse_quantity,
    to_bytes,
    to_hex_string,
    to_optional_uint256,
    to_safe_int,
    to_uint256,
)
from evm_normalization.value_decoders import (
    DEFAULT_VALUE_DECODER,
    TransferValueDecoder,
)


logger = logging.getLogger(__name__)


def _require(raw: Mapping[str, Any], source: PayloadSource, *keys: str) -> Any:
    """Return the first present value among keys (aliases of one field)."""
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    logger.warning(f"[{source.value}_tx] Payload missing required field {keys[0]}")
    raise MalformedInputError(
        message=f"Transaction payload missing {keys[0]}",
        source=source.value,
        field_name=keys[0],
        context={"hash": str(raw.get("hash"))},
    )


def _first_present(raw: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if raw.get(key) is not None:
            return raw[key]
    return None


def _optional_hex(value: Any, field_name: str, source: PayloadSource) -> Optional[str]:
    if not value:
        return None
    return to_hex_string(value, field_name, source.value)


def _optional_safe_int(
    value: Any,
    field_name: str,
    limit: int,
    source: PayloadSource,
) -> Optional[int]:
    if value is None or value == "":
        return None
    return to_safe_int(value, field_name, limit, source.value)


def _signature_component(value: Any, field_name: str, source: PayloadSource) -> Optional[str]:
    """r and s arrive as hex strings, bytes or plain integers."""
    if not value:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return hex(value)
    return to_hex_string(value, field_name, source.value)


def _fee_fields(
    raw: Mapping[str, Any],
    tx_type: TransactionType,
    tx_hash: str,
    source: PayloadSource,
) -> dict[str, Optional[int]]:
    """
    Decode gas price and fee-per-gas fields.

    Legacy transactions must carry gasPrice and never carry fee-per-gas
    fields; any that a provider echoes back are dropped.
    """
    gas_price = to_optional_uint256(raw.get("gasPrice"), "gasPrice", source.value)
    max_fee_per_gas = to_optional_uint256(
        raw.get("maxFeePerGas"), "maxFeePerGas", source.value
    )
    max_priority_fee_per_gas = to_optional_uint256(
        raw.get("maxPriorityFeePerGas"), "maxPriorityFeePerGas", source.value
    )

    if tx_type is TransactionType.LEGACY:
        if gas_price is None:
            logger.warning(f"[{source.value}_tx] Legacy transaction {tx_hash} has no gasPrice")
            raise MalformedInputError(
                message="Legacy transaction missing gasPrice",
                source=source.value,
                field_name="gasPrice",
                context={"hash": tx_hash},
            )
        if max_fee_per_gas is not None or max_priority_fee_per_gas is not None:
            logger.debug(f"[{source.value}_tx] Dropping fee-per-gas fields on legacy {tx_hash}")
        max_fee_per_gas = None
        max_priority_fee_per_gas = None

    return {
        "gas_price": gas_price,
        "max_fee_per_gas": max_fee_per_gas,
        "max_priority_fee_per_gas": max_priority_fee_per_gas,
    }


def _transaction_type(raw_type: Any, tx_hash: str, source: PayloadSource) -> TransactionType:
    if raw_type is None or isinstance(raw_type, bool):
        tx_type = None
    else:
        tx_type = parse_quantity(raw_type, "type", source.value)

    if tx_type not in SUPPORTED_TRANSACTION_TYPES:
        logger.warning(f"[{source.value}_tx] Unknown transaction type {raw_type} for {tx_hash}")
        raise UnsupportedTransactionTypeError(
            message=f"Unknown transaction type {raw_type}",
            tx_type=raw_type,
            source=source.value,
            context={"hash": tx_hash},
        )
    return TransactionType(tx_type)


def tx_from_polled_tx(
    raw: Mapping[str, Any],
    asset: FungibleAsset,
    network: EVMNetwork,
    value_decoder: Optional[TransferValueDecoder] = None,
    config: Optional[NormalizerConfig] = None,
) -> AnyEVMTransaction:
    """
    Parse a transaction as returned by a polling provider.

    The value of a non-native asset transfer is read from the call data
    by value_decoder (fixed-offset heuristic by default).

    Returns:
        SignedEVMTransaction when r, s and v are all non-empty and non-zero,
        EVMTransaction otherwise

    Raises:
        MalformedInputError: hash or another required field is missing
        UnsupportedTransactionTypeError: type is absent or not 0, 1 or 2
        NumericOverflowError: a quantity is out of range
        AssetValueDecodeError: token value cannot be read from call data
    """
    config = config or get_config()
    value_decoder = value_decoder or DEFAULT_VALUE_DECODER
    source = PayloadSource.POLLED
    if config.log_payloads:
        logger.debug(f"[polled_tx] Raw payload: {dict(raw)}")

    if raw.get("hash") is None:
        logger.warning("[polled_tx] Malformed transaction, no hash")
        raise MalformedInputError(
            message="Malformed transaction",
            source=source.value,
            field_name="hash",
        )
    tx_hash = to_hex_string(raw["hash"], "hash", source.value)
    tx_type = _transaction_type(raw.get("type"), tx_hash, source)

    input_data = to_bytes(_first_present(raw, "input", "data"), "input", source.value)

    if network.is_native_asset(asset):
        value = to_uint256(_require(raw, source, "value"), "value", source.value)
    else:
        value = value_decoder.decode_value(input_data, asset)

    fields = dict(
        hash=tx_hash,
        from_address=to_hex_string(_require(raw, source, "from"), "from", source.value),
        to=_optional_hex(raw.get("to"), "to", source),
        nonce=to_safe_int(
            _require(raw, source, "nonce"), "nonce", config.max_safe_integer, source.value
        ),
        gas_limit=to_uint256(_require(raw, source, "gas", "gasLimit"), "gas", source.value),
        **_fee_fields(raw, tx_type, tx_hash, source),
        value=value,
        input=input_data,
        type=tx_type,
        block_hash=_optional_hex(raw.get("blockHash"), "blockHash", source),
        block_height=_optional_safe_int(
            raw.get("blockNumber"), "blockNumber", config.max_safe_integer, source
        ),
        asset=asset,
        network=network,
    )

    r, s, v = raw.get("r"), raw.get("s"), raw.get("v")
    if r and s and v:
        tx: AnyEVMTransaction = SignedEVMTransaction(
            **fields,
            r=_signature_component(r, "r", source),
            s=_signature_component(s, "s", source),
            v=to_safe_int(v, "v", config.max_safe_integer, source.value),
        )
    else:
        tx = EVMTransaction(**fields)

    logger.debug(
        f"[polled_tx] Normalized {tx.hash} type={int(tx.type)} "
        f"asset={asset.symbol} signed={tx.is_signed}"
    )
    return tx


def tx_from_subscription_tx(
    raw: Mapping[str, Any],
    asset: FungibleAsset,
    network: EVMNetwork,
    config: Optional[NormalizerConfig] = None,
) -> EVMTransaction:
    """
    Parse a transaction as delivered by a websocket subscription.

    A missing "type" field falls back to config.default_transaction_type
    (legacy unless configured otherwise). That is an assumption about old
    nodes, not a protocol default.
    """
    config = config or get_config()
    source = PayloadSource.SUBSCRIPTION
    if config.log_payloads:
        logger.debug(f"[subscription_tx] Raw payload: {dict(raw)}")

    tx_hash = to_hex_string(_require(raw, source, "hash"), "hash", source.value)

    raw_type = raw.get("type")
    if raw_type is None:
        tx_type = config.default_transaction_type
    else:
        tx_type = _transaction_type(raw_type, tx_hash, source)

    tx = EVMTransaction(
        hash=tx_hash,
        from_address=to_hex_string(_require(raw, source, "from"), "from", source.value),
        to=_optional_hex(raw.get("to"), "to", source),
        nonce=to_safe_int(
            _require(raw, source, "nonce"), "nonce", config.max_safe_integer, source.value
        ),
        gas_limit=to_uint256(_require(raw, source, "gas"), "gas", source.value),
        **_fee_fields(raw, tx_type, tx_hash, source),
        value=to_uint256(_require(raw, source, "value"), "value", source.value),
        input=to_bytes(raw.get("input"), "input", source.value),
        type=tx_type,
        block_hash=_optional_hex(raw.get("blockHash"), "blockHash", source),
        block_height=_optional_safe_int(
            raw.get("blockNumber"), "blockNumber", config.max_safe_integer, source
        ),
        asset=asset,
        network=network,
        r=_signature_component(raw.get("r"), "r", source),
        s=_signature_component(raw.get("s"), "s", source),
        v=_optional_safe_int(raw.get("v"), "v", config.max_safe_integer, source),
    )

    logger.debug(f"[subscription_tx] Normalized {tx.hash} type={int(tx.type)}")
    return tx


def provider_tx_from_signed_tx(tx: SignedEVMTransaction) -> ProviderTransaction:
    """Convert a signed transaction to the provider's form for broadcast."""
    if not isinstance(tx, SignedEVMTransaction):
        raise TypeError(
            f"Expected SignedEVMTransaction, got {type(tx).__name__}"
        )

    provider_tx: ProviderTransaction = {
        "hash": tx.hash,
        "nonce": tx.nonce,
        "to": tx.to,
        "from": tx.from_address,
        "gas": Wei(tx.gas_limit),
        "value": Wei(tx.value),
        "data": Web3.to_hex(bytes(tx.input)),
        "chainId": parse_chain_id(tx.network),
        "type": int(tx.type),
        "r": tx.r,
        "s": tx.s,
        "v": tx.v,
    }
    if tx.gas_price is not None:
        provider_tx["gasPrice"] = Wei(tx.gas_price)
    if tx.max_fee_per_gas is not None:
        provider_tx["maxFeePerGas"] = Wei(tx.max_fee_per_gas)
    if tx.max_priority_fee_per_gas is not None:
        provider_tx["maxPriorityFeePerGas"] = Wei(tx.max_priority_fee_per_gas)

    return provider_tx
