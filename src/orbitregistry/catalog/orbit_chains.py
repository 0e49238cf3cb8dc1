"""Well-known Orbit chains, keyed by chain ID. Consulted by membership only."""

from orbitregistry.domain.enums import ChainId
from orbitregistry.domain.models import OrbitChainConfig


def _by_id(chains: list[OrbitChainConfig]) -> dict[int, OrbitChainConfig]:
    return {chain.chain_id: chain for chain in chains}


ORBIT_MAINNETS: dict[int, OrbitChainConfig] = _by_id([
    OrbitChainConfig(
        chain_id=660279,
        name="Xai",
        slug="xai",
        parent_chain_id=ChainId.ARBITRUM_ONE,
        rpc_url="https://xai-chain.net/rpc",
        explorer_url="https://explorer.xai-chain.net",
    ),
    OrbitChainConfig(
        chain_id=1380012617,
        name="RARI Mainnet",
        slug="rari-mainnet",
        parent_chain_id=ChainId.ARBITRUM_ONE,
        rpc_url="https://mainnet.rpc.rarichain.org/http",
        explorer_url="https://mainnet.explorer.rarichain.org",
    ),
    OrbitChainConfig(
        chain_id=4078,
        name="Muster",
        slug="muster",
        parent_chain_id=ChainId.ARBITRUM_ONE,
        rpc_url="https://muster.alt.technology",
        explorer_url="https://muster-explorer.alt.technology",
    ),
    OrbitChainConfig(
        chain_id=70700,
        name="Proof of Play Apex",
        slug="pop-apex",
        parent_chain_id=ChainId.ARBITRUM_NOVA,
        rpc_url="https://rpc.apex.proofofplay.com",
        explorer_url="https://explorer.apex.proofofplay.com",
    ),
    OrbitChainConfig(
        chain_id=1996,
        name="Sanko",
        slug="sanko",
        parent_chain_id=ChainId.ARBITRUM_ONE,
        rpc_url="https://mainnet.sanko.xyz",
        explorer_url="https://explorer.sanko.xyz",
    ),
])

ORBIT_TESTNETS: dict[int, OrbitChainConfig] = _by_id([
    OrbitChainConfig(
        chain_id=37714555429,
        name="Xai Testnet",
        slug="xai-testnet",
        parent_chain_id=ChainId.ARBITRUM_SEPOLIA,
        rpc_url="https://testnet-v2.xai-chain.net/rpc",
        explorer_url="https://testnet-explorer-v2.xai-chain.net",
    ),
    OrbitChainConfig(
        chain_id=1918988905,
        name="RARI Testnet",
        slug="rari-testnet",
        parent_chain_id=ChainId.ARBITRUM_SEPOLIA,
        rpc_url="https://testnet.rpc.rarichain.org/http",
        explorer_url="https://testnet.explorer.rarichain.org",
    ),
    OrbitChainConfig(
        chain_id=53457,
        name="DODOchain Testnet",
        slug="dodochain-testnet",
        parent_chain_id=ChainId.ARBITRUM_SEPOLIA,
        rpc_url="https://dodochain-testnet.alt.technology",
        explorer_url="https://testnet-scan.dodochain.com",
    ),
])
