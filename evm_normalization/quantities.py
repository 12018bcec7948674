"""
Quantity decoding shared by the polling and subscription paths.

Accepts the encodings both providers use for numbers:
- int (web3 formatted responses)
- 0x-prefixed hex strings (raw JSON-RPC / subscriptions)
- decimal digit strings
- bytes / HexBytes, read big-endian
"""

from typing import Any, Optional

from hexbytes import HexBytes
from web3 import Web3

from evm_normalization.constants import MAX_UINT256
from evm_normalization.exceptions import MalformedInputError, NumericOverflowError


def is_hex_string(value: Any) -> bool:
    return isinstance(value, str) and value[:2] in ("0x", "0X")


def parse_quantity(
    value: Any,
    field_name: str,
    source: Optional[str] = None,
) -> int:
    """
    Decode an unsigned quantity.

    Raises:
        MalformedInputError: value is missing, negative or not numeric
    """
    if value is None:
        raise MalformedInputError(
            message=f"Missing quantity {field_name}",
            source=source,
            field_name=field_name,
        )
    if isinstance(value, bool):
        raise MalformedInputError(
            message=f"Boolean is not a quantity for {field_name}",
            source=source,
            field_name=field_name,
            raw_value=value,
        )

    try:
        if isinstance(value, int):
            result = value
        elif isinstance(value, (bytes, bytearray)):
            result = Web3.to_int(primitive=bytes(value))
        elif is_hex_string(value):
            result = Web3.to_int(hexstr=value)
        elif isinstance(value, str) and value.isdigit():
            result = int(value, 10)
        else:
            raise ValueError(f"unsupported quantity encoding {type(value).__name__}")
    except (TypeError, ValueError) as e:
        raise MalformedInputError(
            message=f"Cannot decode {field_name} as an unsigned integer",
            source=source,
            field_name=field_name,
            raw_value=value,
            original_error=e,
        )

    if result < 0:
        raise MalformedInputError(
            message=f"Negative value for unsigned {field_name}",
            source=source,
            field_name=field_name,
            raw_value=value,
        )
    return result


def _check_limit(
    result: int,
    limit: int,
    value: Any,
    field_name: str,
    source: Optional[str],
) -> int:
    if result > limit:
        raise NumericOverflowError(
            message=f"{field_name} exceeds {limit}",
            limit=limit,
            source=source,
            field_name=field_name,
            raw_value=value,
        )
    return result


def to_uint256(value: Any, field_name: str, source: Optional[str] = None) -> int:
    """Decode a 256-bit unsigned quantity."""
    result = parse_quantity(value, field_name, source)
    return _check_limit(result, MAX_UINT256, value, field_name, source)


def to_optional_uint256(
    value: Any,
    field_name: str,
    source: Optional[str] = None,
) -> Optional[int]:
    """Like to_uint256, but absent values stay None instead of becoming 0."""
    if value is None:
        return None
    return to_uint256(value, field_name, source)


def to_safe_int(
    value: Any,
    field_name: str,
    limit: int,
    source: Optional[str] = None,
) -> int:
    """Decode a quantity that downstream code keeps in a platform-limited integer."""
    result = parse_quantity(value, field_name, source)
    return _check_limit(result, limit, value, field_name, source)


def to_hex_string(value: Any, field_name: str, source: Optional[str] = None) -> str:
    """Render hashes and signature components as 0x-prefixed strings."""
    if isinstance(value, (bytes, bytearray)):
        return Web3.to_hex(bytes(value))
    if isinstance(value, str) and value:
        return value
    raise MalformedInputError(
        message=f"{field_name} must be a hex string or bytes",
        source=source,
        field_name=field_name,
        raw_value=value,
    )


def to_bytes(value: Any, field_name: str, source: Optional[str] = None) -> HexBytes:
    """Decode call data; None and empty strings decode to empty bytes."""
    if value is None or value == "":
        return HexBytes(b"")
    if isinstance(value, str) and not is_hex_string(value):
        raise MalformedInputError(
            message=f"{field_name} must be 0x-prefixed",
            source=source,
            field_name=field_name,
            raw_value=value,
        )
    try:
        return HexBytes(value)
    except (TypeError, ValueError) as e:
        raise MalformedInputError(
            message=f"{field_name} is not valid hex data",
            source=source,
            field_name=field_name,
            raw_value=value,
            original_error=e,
        )
