"""
Network Adapter Tests.
"""

import pytest

from evm_normalization import (
    ETH,
    ETHEREUM,
    EVMNetwork,
    MalformedInputError,
    NormalizerConfig,
    ProviderNetwork,
    provider_network_from_network,
)
from evm_normalization.constants import ARBITRUM, POLYGON


class TestProviderNetwork:
    """Tests for provider_network_from_network."""

    def test_mainnet_uses_legacy_alias(self):
        network = provider_network_from_network(ETHEREUM)

        assert network == ProviderNetwork(name="homestead", chain_id=1)

    @pytest.mark.parametrize("canonical,expected", [
        (POLYGON, ProviderNetwork(name="polygon", chain_id=137)),
        (ARBITRUM, ProviderNetwork(name="arbitrum", chain_id=42161)),
    ])
    def test_other_networks_lowercased(self, canonical, expected):
        assert provider_network_from_network(canonical) == expected

    def test_alias_from_config(self):
        config = NormalizerConfig(mainnet_provider_alias="mainnet")

        network = provider_network_from_network(ETHEREUM, config=config)

        assert network.name == "mainnet"
        assert network.chain_id == 1

    def test_name_match_is_exact(self):
        network = EVMNetwork(chain_id="1", name="ethereum", native_asset=ETH)

        assert provider_network_from_network(network).name == "ethereum"

    def test_non_numeric_chain_id(self):
        network = EVMNetwork(chain_id="0x1", name="Ethereum", native_asset=ETH)

        with pytest.raises(MalformedInputError) as exc_info:
            provider_network_from_network(network)

        assert exc_info.value.field_name == "chain_id"

    def test_to_dict(self):
        assert provider_network_from_network(ETHEREUM).to_dict() == {
            "name": "homestead",
            "chainId": 1,
        }
