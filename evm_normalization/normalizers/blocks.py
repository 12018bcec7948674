"""
Block Normalizer - Polled and subscription blocks to EVMBlock.

Polled blocks come from web3 (BlockData: ints and HexBytes).
Subscription blocks come from newHeads (every quantity a hex string).
Both are pinned to the canonical block network; nothing is inferred
from the payload.
"""

import logging
from typing import Any, Mapping, Optional

from evm_normalization.config import NormalizerConfig, get_config
from evm_normalization.constants import CANONICAL_BLOCK_NETWORK
from evm_normalization.exceptions import MalformedInputError
from evm_normalization.models import EVMBlock, PayloadSource
from evm_normalization.quantities import (
    to_hex_string,
    to_optional_uint256,
    to_safe_int,
    to_uint256,
)


logger = logging.getLogger(__name__)


def _require(raw: Mapping[str, Any], key: str, source: PayloadSource) -> Any:
    value = raw.get(key)
    if value is None:
        logger.warning(f"[{source.value}_block] Payload missing required field {key}")
        raise MalformedInputError(
            message=f"Block payload missing {key}",
            source=source.value,
            field_name=key,
        )
    return value


def block_from_polled_block(
    raw: Mapping[str, Any],
    config: Optional[NormalizerConfig] = None,
) -> EVMBlock:
    """
    Parse a block as returned by a polling provider.

    difficulty is always 0. The provider surfaces it as a native number
    that overflows now that mainnet difficulty exceeds 2**53, and the
    exact value is not available at this layer.
    """
    config = config or get_config()
    source = PayloadSource.POLLED
    if config.log_payloads:
        logger.debug(f"[polled_block] Raw payload: {dict(raw)}")

    block = EVMBlock(
        hash=to_hex_string(_require(raw, "hash", source), "hash", source.value),
        parent_hash=to_hex_string(
            _require(raw, "parentHash", source), "parentHash", source.value
        ),
        block_height=to_safe_int(
            _require(raw, "number", source),
            "number",
            config.max_safe_integer,
            source.value,
        ),
        difficulty=0,
        timestamp=to_safe_int(
            _require(raw, "timestamp", source),
            "timestamp",
            config.max_safe_integer,
            source.value,
        ),
        base_fee_per_gas=to_optional_uint256(
            raw.get("baseFeePerGas"), "baseFeePerGas", source.value
        ),
        network=CANONICAL_BLOCK_NETWORK,
    )

    logger.debug(f"[polled_block] Normalized block {block.block_height} {block.hash}")
    return block


def block_from_subscription_block(
    raw: Mapping[str, Any],
    config: Optional[NormalizerConfig] = None,
) -> EVMBlock:
    """Parse a block header as delivered by a websocket subscription."""
    config = config or get_config()
    source = PayloadSource.SUBSCRIPTION
    if config.log_payloads:
        logger.debug(f"[subscription_block] Raw payload: {dict(raw)}")

    block = EVMBlock(
        hash=to_hex_string(_require(raw, "hash", source), "hash", source.value),
        parent_hash=to_hex_string(
            _require(raw, "parentHash", source), "parentHash", source.value
        ),
        block_height=to_safe_int(
            _require(raw, "number", source),
            "number",
            config.max_safe_integer,
            source.value,
        ),
        difficulty=to_uint256(
            _require(raw, "difficulty", source), "difficulty", source.value
        ),
        timestamp=to_safe_int(
            _require(raw, "timestamp", source),
            "timestamp",
            config.max_safe_integer,
            source.value,
        ),
        base_fee_per_gas=to_optional_uint256(
            raw.get("baseFeePerGas") or None, "baseFeePerGas", source.value
        ),
        network=CANONICAL_BLOCK_NETWORK,
    )

    logger.debug(
        f"[subscription_block] Normalized block {block.block_height} {block.hash}"
    )
    return block
