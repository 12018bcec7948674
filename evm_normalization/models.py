"""
EVM Data Models - Canonical blocks, transactions and networks.

Both transport paths (polling and subscription providers) normalize into
these value objects. All of them are frozen; use dataclasses.replace to
derive a modified copy.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, ClassVar, Mapping, Optional, TypedDict, Union

from hexbytes import HexBytes
from web3.types import Wei

from evm_normalization.exceptions import MalformedInputError


class PayloadSource(Enum):
    """Transport path a raw payload arrived through."""
    POLLED = "polled"
    SUBSCRIPTION = "subscription"


class TransactionType(IntEnum):
    """EIP-2718 envelope types understood by the wallet."""
    LEGACY = 0
    ACCESS_LIST = 1
    DYNAMIC_FEE = 2


def _hex(data: bytes) -> str:
    return "0x" + bytes(data).hex()


def _optional_str(value: Optional[int]) -> Optional[str]:
    return str(value) if value is not None else None


@dataclass(frozen=True)
class FungibleAsset:
    """A fungible asset; the native asset of a network is one of these."""
    name: str
    symbol: str
    decimals: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "symbol": self.symbol,
            "decimals": self.decimals,
        }


@dataclass(frozen=True)
class SmartContractFungibleAsset(FungibleAsset):
    """A token issued by a contract (ERC-20 style)."""
    contract_address: str = ""
    home_network_chain_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update({
            "contract_address": self.contract_address,
            "home_network_chain_id": self.home_network_chain_id,
        })
        return data


@dataclass(frozen=True)
class EVMNetwork:
    """
    Canonical network descriptor, supplied by the network registry.

    chain_id is kept in its registry form: a decimal string.
    """
    chain_id: str
    name: str
    native_asset: FungibleAsset

    def is_native_asset(self, asset: FungibleAsset) -> bool:
        """Check whether asset is this network's base currency."""
        return asset.symbol == self.native_asset.symbol

    def to_dict(self) -> dict[str, Any]:
        return {
            "chain_id": self.chain_id,
            "name": self.name,
            "native_asset": self.native_asset.to_dict(),
        }


@dataclass(frozen=True)
class EVMBlock:
    """Canonical block header."""
    hash: str
    parent_hash: str
    block_height: int
    difficulty: int
    timestamp: int  # unix seconds
    base_fee_per_gas: Optional[int]
    network: EVMNetwork

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "hash": self.hash,
            "parent_hash": self.parent_hash,
            "block_height": self.block_height,
            "difficulty": str(self.difficulty),
            "timestamp": self.timestamp,
            "base_fee_per_gas": _optional_str(self.base_fee_per_gas),
            "network": self.network.to_dict(),
        }


@dataclass(frozen=True)
class EVMTransaction:
    """
    Canonical transaction, not known to be signed.

    r, s and v may still be carried through from a subscription payload;
    only SignedEVMTransaction guarantees all three.
    """
    hash: str
    from_address: str
    to: Optional[str]
    nonce: int
    gas_limit: int
    gas_price: Optional[int]
    max_fee_per_gas: Optional[int]
    max_priority_fee_per_gas: Optional[int]
    value: int
    input: HexBytes
    type: TransactionType
    block_hash: Optional[str]
    block_height: Optional[int]
    asset: FungibleAsset
    network: EVMNetwork
    r: Optional[str] = field(default=None)
    s: Optional[str] = field(default=None)
    v: Optional[int] = field(default=None)

    @property
    def is_signed(self) -> bool:
        return False

    @property
    def is_confirmed(self) -> bool:
        """Check whether the transaction has been included in a block."""
        return self.block_hash is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "hash": self.hash,
            "from": self.from_address,
            "to": self.to,
            "nonce": self.nonce,
            "gas_limit": str(self.gas_limit),
            "gas_price": _optional_str(self.gas_price),
            "max_fee_per_gas": _optional_str(self.max_fee_per_gas),
            "max_priority_fee_per_gas": _optional_str(self.max_priority_fee_per_gas),
            "value": str(self.value),
            "input": _hex(self.input),
            "type": int(self.type),
            "block_hash": self.block_hash,
            "block_height": self.block_height,
            "asset": self.asset.to_dict(),
            "network": self.network.to_dict(),
            "r": self.r,
            "s": self.s,
            "v": self.v,
        }


@dataclass(frozen=True)
class SignedEVMTransaction(EVMTransaction):
    """Transaction carrying all three signature components."""
    r: str
    s: str
    v: int

    def __post_init__(self) -> None:
        missing = [
            name for name in ("r", "s", "v")
            if getattr(self, name) is None
        ]
        if missing:
            raise MalformedInputError(
                message=f"Signed transaction missing signature components {missing}",
                field_name=missing[0],
                context={"hash": self.hash},
            )

    @property
    def is_signed(self) -> bool:
        return True


AnyEVMTransaction = Union[EVMTransaction, SignedEVMTransaction]


@dataclass(frozen=True)
class ProviderNetwork:
    """Network descriptor in the form the provider library expects."""
    name: str
    chain_id: int

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "chainId": self.chain_id}


# Provider-facing transaction, keyed like web3 TxParams.
ProviderTransaction = TypedDict(
    "ProviderTransaction",
    {
        "hash": str,
        "nonce": int,
        "to": Optional[str],
        "from": str,
        "gas": Wei,
        "gasPrice": Wei,
        "maxFeePerGas": Wei,
        "maxPriorityFeePerGas": Wei,
        "value": Wei,
        "data": str,
        "chainId": int,
        "type": int,
        "r": str,
        "s": str,
        "v": int,
    },
    total=False,
)


# ============================================================
# RAW PAYLOAD VARIANTS
# ============================================================

@dataclass(frozen=True)
class PolledBlockPayload:
    """Block as returned by a polling provider (web3 BlockData)."""
    source: ClassVar[PayloadSource] = PayloadSource.POLLED
    data: Mapping[str, Any]


@dataclass(frozen=True)
class SubscriptionBlockPayload:
    """Block header pushed by a newHeads subscription."""
    source: ClassVar[PayloadSource] = PayloadSource.SUBSCRIPTION
    data: Mapping[str, Any]


@dataclass(frozen=True)
class PolledTransactionPayload:
    """Transaction as returned by a polling provider (web3 TxData)."""
    source: ClassVar[PayloadSource] = PayloadSource.POLLED
    data: Mapping[str, Any]


@dataclass(frozen=True)
class SubscriptionTransactionPayload:
    """Transaction pushed by a subscription, all quantities hex encoded."""
    source: ClassVar[PayloadSource] = PayloadSource.SUBSCRIPTION
    data: Mapping[str, Any]


BlockPayload = Union[PolledBlockPayload, SubscriptionBlockPayload]
TransactionPayload = Union[PolledTransactionPayload, SubscriptionTransactionPayload]
