"""
EVM Normalization - Constants.

Canonical networks, native assets and numeric limits.
"""

from evm_normalization.models import EVMNetwork, FungibleAsset, TransactionType


# ============================================================
# NUMERIC LIMITS
# ============================================================

MAX_UINT256 = 2**256 - 1

# Largest integer a double can represent exactly; downstream consumers
# store heights, timestamps and nonces in that width.
MAX_SAFE_INTEGER = 2**53 - 1

# Bytes read from the end of call data when deriving token transfer value.
TRANSFER_VALUE_WORD_BYTES = 32


# ============================================================
# TRANSACTION TYPES
# ============================================================

SUPPORTED_TRANSACTION_TYPES = frozenset(int(t) for t in TransactionType)

# Subscription payloads without a "type" field are assumed legacy.
# Not a protocol guarantee: pre-Berlin nodes omit the field, later nodes
# always send it.
DEFAULT_TRANSACTION_TYPE = TransactionType.LEGACY


# ============================================================
# NETWORKS
# ============================================================

ETH = FungibleAsset(name="Ether", symbol="ETH", decimals=18)
MATIC = FungibleAsset(name="Matic Token", symbol="MATIC", decimals=18)

ETHEREUM = EVMNetwork(chain_id="1", name="Ethereum", native_asset=ETH)
POLYGON = EVMNetwork(chain_id="137", name="Polygon", native_asset=MATIC)
ARBITRUM = EVMNetwork(chain_id="42161", name="Arbitrum", native_asset=ETH)
OPTIMISM = EVMNetwork(chain_id="10", name="Optimism", native_asset=ETH)
GOERLI = EVMNetwork(chain_id="5", name="Goerli", native_asset=ETH)

# Blocks are only tracked on a single chain in this integration.
CANONICAL_BLOCK_NETWORK = ETHEREUM

MAINNET_NETWORK_NAME = "Ethereum"
# ethers-compatible providers still name mainnet "homestead"
MAINNET_PROVIDER_ALIAS = "homestead"
