"""
Network Adapter - Canonical networks to provider network descriptors.
"""

from typing import Optional

from evm_normalization.config import NormalizerConfig, get_config
from evm_normalization.exceptions import MalformedInputError
from evm_normalization.models import EVMNetwork, ProviderNetwork


def parse_chain_id(network: EVMNetwork) -> int:
    """Parse the registry's decimal chain ID string."""
    try:
        return int(network.chain_id, 10)
    except (TypeError, ValueError) as e:
        raise MalformedInputError(
            message=f"Chain ID of {network.name} is not a decimal integer",
            field_name="chain_id",
            raw_value=network.chain_id,
            original_error=e,
        )


def provider_network_from_network(
    network: EVMNetwork,
    config: Optional[NormalizerConfig] = None,
) -> ProviderNetwork:
    """Convert a canonical network to the provider library's descriptor."""
    config = config or get_config()

    if network.name == config.mainnet_network_name:
        name = config.mainnet_provider_alias
    else:
        name = network.name.lower()

    return ProviderNetwork(name=name, chain_id=parse_chain_id(network))
