"""
Quantity Decoding Tests.

============================================================
PURPOSE
============================================================
Decoding of the numeric encodings used by both providers:
ints, hex strings, decimal strings and bytes.

============================================================
"""

import pytest
from hexbytes import HexBytes

from evm_normalization import (
    MAX_UINT256,
    MalformedInputError,
    NumericOverflowError,
)
from evm_normalization.quantities import (
    parse_quantity,
    to_bytes,
    to_hex_string,
    to_optional_uint256,
    to_safe_int,
    to_uint256,
)


# ============================================================
# PARSE QUANTITY TESTS
# ============================================================

class TestParseQuantity:
    """Tests for parse_quantity."""

    def test_hex_string(self):
        """Test hex decoding of a gas price."""
        assert parse_quantity("0x2540be400", "gasPrice") == 10_000_000_000

    def test_hex_zero(self):
        """Test that 0x0 decodes to zero."""
        assert parse_quantity("0x0", "value") == 0

    def test_uppercase_prefix(self):
        assert parse_quantity("0X10", "nonce") == 16

    def test_int_passthrough(self):
        assert parse_quantity(21000, "gas") == 21000

    def test_decimal_string(self):
        """Test base-10 strings as sent for polled nonces."""
        assert parse_quantity("42", "nonce") == 42

    def test_bytes_big_endian(self):
        assert parse_quantity(HexBytes("0x0100"), "v") == 256

    def test_none_is_malformed(self):
        with pytest.raises(MalformedInputError) as exc_info:
            parse_quantity(None, "gas", source="polled")

        assert exc_info.value.field_name == "gas"
        assert exc_info.value.source == "polled"

    def test_bool_rejected(self):
        with pytest.raises(MalformedInputError):
            parse_quantity(True, "type")

    def test_negative_rejected(self):
        with pytest.raises(MalformedInputError, match="Negative"):
            parse_quantity(-1, "value")

    @pytest.mark.parametrize("raw", ["0x", "0xzz", "", "12.5", "ten", 1.5])
    def test_garbage_rejected(self, raw):
        """Test that non-numeric encodings are malformed input."""
        with pytest.raises(MalformedInputError):
            parse_quantity(raw, "value")


# ============================================================
# RANGE TESTS
# ============================================================

class TestRanges:
    """Tests for 256-bit and safe-integer range checks."""

    def test_uint256_max_accepted(self):
        assert to_uint256(hex(MAX_UINT256), "value") == MAX_UINT256

    def test_uint256_overflow(self):
        with pytest.raises(NumericOverflowError) as exc_info:
            to_uint256(hex(MAX_UINT256 + 1), "value")

        assert exc_info.value.limit == MAX_UINT256

    def test_optional_uint256_absent_stays_none(self):
        """Test that absent optional fields are None, not zero."""
        assert to_optional_uint256(None, "maxFeePerGas") is None

    def test_optional_uint256_zero_is_zero(self):
        assert to_optional_uint256("0x0", "maxFeePerGas") == 0

    def test_safe_int_at_limit(self):
        assert to_safe_int("0x1fffffffffffff", "number", 2**53 - 1) == 2**53 - 1

    def test_safe_int_over_limit(self):
        """Test that values above the ceiling are not truncated."""
        with pytest.raises(NumericOverflowError):
            to_safe_int("0x20000000000000", "number", 2**53 - 1)


# ============================================================
# HEX AND BYTES TESTS
# ============================================================

class TestHexAndBytes:
    """Tests for hash and call-data decoding."""

    def test_hexbytes_to_string(self):
        assert to_hex_string(HexBytes("0xabcd"), "hash") == "0xabcd"

    def test_string_passthrough(self):
        assert to_hex_string("0xAbCd", "hash") == "0xAbCd"

    @pytest.mark.parametrize("raw", [None, "", 123])
    def test_hex_string_rejects(self, raw):
        with pytest.raises(MalformedInputError):
            to_hex_string(raw, "hash")

    def test_bytes_from_hex(self):
        assert to_bytes("0xa9059cbb", "input") == b"\xa9\x05\x9c\xbb"

    @pytest.mark.parametrize("raw", [None, "", "0x"])
    def test_empty_call_data(self, raw):
        assert to_bytes(raw, "input") == b""

    def test_unprefixed_hex_rejected(self):
        with pytest.raises(MalformedInputError, match="0x-prefixed"):
            to_bytes("a9059cbb", "input")

    def test_invalid_hex_rejected(self):
        with pytest.raises(MalformedInputError):
            to_bytes("0xnothex", "input")
