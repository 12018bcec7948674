"""
Shared payload builders for normalization tests.

Polled payloads mimic web3 output (AttributeDict, HexBytes, ints).
Subscription payloads mimic raw JSON-RPC (hex strings).
"""

from typing import Any

from hexbytes import HexBytes
from web3.datastructures import AttributeDict

from evm_normalization import SmartContractFungibleAsset


OMIT = object()

SENDER = "0x8ba1f109551bD432803012645Ac136ddd64DBA72"
RECIPIENT = "0xdAC17F958D2ee523a2206206994597C13D831ec7"
TX_HASH = "0x" + "ab" * 32
BLOCK_HASH = "0x" + "cd" * 32
PARENT_HASH = "0x" + "ef" * 32

USDC = SmartContractFungibleAsset(
    name="USD Coin",
    symbol="USDC",
    decimals=6,
    contract_address="0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
    home_network_chain_id="1",
)


def transfer_call_data(amount: int, recipient: str = RECIPIENT) -> str:
    """transfer(address,uint256) call data."""
    return (
        "0xa9059cbb"
        + recipient[2:].lower().rjust(64, "0")
        + format(amount, "x").rjust(64, "0")
    )


def _build(defaults: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    data = dict(defaults)
    data.update(overrides)
    return {k: v for k, v in data.items() if v is not OMIT}


def polled_tx(**overrides: Any) -> AttributeDict:
    """Signed legacy ETH transfer as web3 returns it."""
    defaults = {
        "hash": HexBytes(TX_HASH),
        "from": SENDER,
        "to": RECIPIENT,
        "nonce": 7,
        "gas": 21000,
        "gasPrice": 20_000_000_000,
        "value": 10**18,
        "input": HexBytes("0x"),
        "type": 0,
        "blockHash": HexBytes(BLOCK_HASH),
        "blockNumber": 17_000_000,
        "r": HexBytes("0x" + "11" * 32),
        "s": HexBytes("0x" + "22" * 32),
        "v": 27,
    }
    return AttributeDict(_build(defaults, overrides))


def subscription_tx(**overrides: Any) -> dict[str, Any]:
    """Pending dynamic-fee transaction as pushed by a subscription."""
    defaults = {
        "hash": TX_HASH,
        "from": SENDER.lower(),
        "to": RECIPIENT.lower(),
        "nonce": "0x7",
        "gas": "0x5208",
        "gasPrice": "0x2540be400",
        "maxFeePerGas": "0x2540be400",
        "maxPriorityFeePerGas": "0x3b9aca00",
        "value": "0xde0b6b3a7640000",
        "input": "0x",
        "type": "0x2",
        "blockHash": None,
        "blockNumber": None,
        "r": "0x" + "11" * 32,
        "s": "0x" + "22" * 32,
        "v": "0x1",
    }
    return _build(defaults, overrides)


def polled_block(**overrides: Any) -> AttributeDict:
    defaults = {
        "hash": HexBytes(BLOCK_HASH),
        "parentHash": HexBytes(PARENT_HASH),
        "number": 17_000_000,
        "timestamp": 1_681_338_455,
        "difficulty": 58_750_003_716_598_352_816_469,
        "baseFeePerGas": 25_000_000_000,
    }
    return AttributeDict(_build(defaults, overrides))


def subscription_block(**overrides: Any) -> dict[str, Any]:
    defaults = {
        "hash": BLOCK_HASH,
        "parentHash": PARENT_HASH,
        "number": "0x1036640",
        "timestamp": "0x6436c5b7",
        "difficulty": "0x2540be400",
        "baseFeePerGas": "0x5d21dba00",
    }
    return _build(defaults, overrides)
