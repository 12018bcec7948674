"""
Transfer Value Decoders - Recover token amounts from call data.

Non-native asset transfers carry the amount inside the contract call,
not in the transaction's value field. Decoders pull it back out.

Adding a real ABI decoder:
    class AbiTransferValueDecoder(TransferValueDecoder):
        def decode_value(self, input_data, asset): ...

    tx_from_polled_tx(raw, asset, network, value_decoder=AbiTransferValueDecoder())
"""

import logging
from abc import ABC, abstractmethod

from evm_normalization.constants import TRANSFER_VALUE_WORD_BYTES
from evm_normalization.exceptions import AssetValueDecodeError
from evm_normalization.models import FungibleAsset


logger = logging.getLogger(__name__)


class TransferValueDecoder(ABC):
    """Interface for deriving a transfer amount from transaction input."""

    @abstractmethod
    def decode_value(self, input_data: bytes, asset: FungibleAsset) -> int:
        """
        Derive the transferred amount of asset.

        Raises:
            AssetValueDecodeError: If the amount cannot be recovered
        """
        pass


class FixedOffsetTransferValueDecoder(TransferValueDecoder):
    """
    Best-effort heuristic: the amount is the last 32-byte word of the call.

    Matches transfer(address,uint256), where the word after the selector
    and the padded recipient is the amount. The selector is NOT checked,
    so calls with any other layout produce a wrong value. This is not
    ABI decoding.
    """

    def decode_value(self, input_data: bytes, asset: FungibleAsset) -> int:
        if len(input_data) < TRANSFER_VALUE_WORD_BYTES:
            logger.warning(
                f"[value_decoder] {asset.symbol} call data too short "
                f"({len(input_data)} bytes) to carry a transfer amount"
            )
            raise AssetValueDecodeError(
                message=(
                    f"Call data has {len(input_data)} bytes, "
                    f"need at least {TRANSFER_VALUE_WORD_BYTES}"
                ),
                asset_symbol=asset.symbol,
                raw_value="0x" + bytes(input_data).hex(),
            )

        word = bytes(input_data[-TRANSFER_VALUE_WORD_BYTES:])
        return int.from_bytes(word, "big")


DEFAULT_VALUE_DECODER = FixedOffsetTransferValueDecoder()
