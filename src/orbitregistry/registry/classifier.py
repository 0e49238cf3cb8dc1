"""Classifier: boolean facts about a chain ID."""

from orbitregistry.catalog.orbit_chains import ORBIT_MAINNETS, ORBIT_TESTNETS
from orbitregistry.domain.enums import ChainId
from orbitregistry.domain.models import ClassificationResult, OrbitChainConfig
from orbitregistry.registry.custom_chains import CustomChainStore
from orbitregistry.registry.registry import ChainRegistry


class Classifier:
    """Classifies chain IDs against the custom store and the Orbit membership tables.

    Any chain outside the Ethereum and Arbitrum families is Orbit, including
    IDs nobody has registered.
    """

    def __init__(
        self,
        custom_chains: CustomChainStore,
        orbit_mainnets: dict[int, OrbitChainConfig] | None = None,
        orbit_testnets: dict[int, OrbitChainConfig] | None = None,
    ) -> None:
        self._custom_chains = custom_chains
        self._orbit_mainnets = ORBIT_MAINNETS if orbit_mainnets is None else orbit_mainnets
        self._orbit_testnets = ORBIT_TESTNETS if orbit_testnets is None else orbit_testnets

    def classify(self, chain_id: int) -> ClassificationResult:
        is_mainnet_orbit_chain = chain_id in self._orbit_mainnets
        is_testnet_orbit_chain = chain_id in self._orbit_testnets

        is_ethereum_mainnet = chain_id == ChainId.ETHEREUM

        is_sepolia = chain_id == ChainId.SEPOLIA
        is_holesky = chain_id == ChainId.HOLESKY
        is_local = chain_id == ChainId.LOCAL

        is_arbitrum_one = chain_id == ChainId.ARBITRUM_ONE
        is_arbitrum_nova = chain_id == ChainId.ARBITRUM_NOVA
        is_arbitrum_sepolia = chain_id == ChainId.ARBITRUM_SEPOLIA
        is_arbitrum_local = chain_id == ChainId.ARBITRUM_LOCAL

        is_stylus_testnet = chain_id == ChainId.STYLUS_TESTNET

        is_ethereum_mainnet_or_testnet = is_ethereum_mainnet or is_sepolia or is_holesky or is_local
        is_arbitrum = is_arbitrum_one or is_arbitrum_nova or is_arbitrum_local or is_arbitrum_sepolia

        is_custom_orbit_chain = chain_id in self._custom_chains.chain_ids()

        is_core_chain = is_ethereum_mainnet_or_testnet or is_arbitrum
        is_orbit_chain = not is_core_chain

        is_testnet = (
            is_local
            or is_arbitrum_local
            or is_sepolia
            or is_holesky
            or is_arbitrum_sepolia
            or is_custom_orbit_chain
            or is_stylus_testnet
            or is_testnet_orbit_chain
        )

        is_supported = (
            is_arbitrum_one
            or is_arbitrum_nova
            or is_ethereum_mainnet
            or is_sepolia
            or is_holesky
            or is_arbitrum_sepolia
            or is_custom_orbit_chain
            or is_mainnet_orbit_chain
            or is_testnet_orbit_chain
        )

        return ClassificationResult(
            is_ethereum_mainnet=is_ethereum_mainnet,
            is_ethereum_mainnet_or_testnet=is_ethereum_mainnet_or_testnet,
            is_sepolia=is_sepolia,
            is_holesky=is_holesky,
            is_local=is_local,
            is_arbitrum=is_arbitrum,
            is_arbitrum_one=is_arbitrum_one,
            is_arbitrum_nova=is_arbitrum_nova,
            is_arbitrum_sepolia=is_arbitrum_sepolia,
            is_arbitrum_local=is_arbitrum_local,
            is_stylus_testnet=is_stylus_testnet,
            is_custom_orbit_chain=is_custom_orbit_chain,
            is_mainnet_orbit_chain=is_mainnet_orbit_chain,
            is_testnet_orbit_chain=is_testnet_orbit_chain,
            is_orbit_chain=is_orbit_chain,
            is_testnet=is_testnet,
            is_supported=is_supported,
            is_core_chain=is_core_chain,
        )


def supported_chain_ids(
    registry: ChainRegistry,
    classifier: Classifier,
    include_mainnets: bool = True,
    include_testnets: bool = False,
) -> list[int]:
    """Listed chain IDs, filtered to mainnets, testnets, both or neither."""
    result: list[int] = []
    for chain in registry.list_chains():
        is_testnet = classifier.classify(chain.chain_id).is_testnet
        if include_mainnets and not include_testnets:
            keep = not is_testnet
        elif include_testnets and not include_mainnets:
            keep = is_testnet
        else:
            keep = include_mainnets and include_testnets
        if keep:
            result.append(chain.chain_id)
    return result
