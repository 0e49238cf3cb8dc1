"""Built-in chain definitions and the default local development pair."""

from orbitregistry.domain.enums import DEVNET_CHAIN_ID, ChainId
from orbitregistry.domain.models import ChainDefinition

# Minimum Arbitrum block time in seconds
ARB_MINIMUM_BLOCK_TIME_IN_SECONDS = 0.25

# Enumeration order is the catalog order used by listing and destinations
BUILTIN_CHAINS: list[ChainDefinition] = [
    ChainDefinition(
        chain_id=ChainId.ETHEREUM,
        name="Mainnet",
        explorer_url="https://etherscan.io",
        block_time=14,
        child_chain_ids=[ChainId.ARBITRUM_ONE, ChainId.ARBITRUM_NOVA],
    ),
    ChainDefinition(
        chain_id=DEVNET_CHAIN_ID,
        name="Hardhat_Mainnet_Fork",
        explorer_url="",
        block_time=1,
        child_chain_ids=[],
    ),
    ChainDefinition(
        chain_id=ChainId.SEPOLIA,
        name="Sepolia",
        explorer_url="https://sepolia.etherscan.io",
        block_time=12,
        child_chain_ids=[ChainId.ARBITRUM_SEPOLIA],
    ),
    ChainDefinition(
        chain_id=ChainId.HOLESKY,
        name="Holesky",
        explorer_url="https://holesky.etherscan.io",
        block_time=12,
        child_chain_ids=[],
    ),
    ChainDefinition(
        chain_id=ChainId.ARBITRUM_ONE,
        name="Arbitrum One",
        explorer_url="https://arbiscan.io",
        block_time=ARB_MINIMUM_BLOCK_TIME_IN_SECONDS,
        is_arbitrum=True,
        parent_chain_id=ChainId.ETHEREUM,
        confirm_period_blocks=45818,
    ),
    ChainDefinition(
        chain_id=ChainId.ARBITRUM_NOVA,
        name="Arbitrum Nova",
        explorer_url="https://nova.arbiscan.io",
        block_time=ARB_MINIMUM_BLOCK_TIME_IN_SECONDS,
        is_arbitrum=True,
        parent_chain_id=ChainId.ETHEREUM,
        confirm_period_blocks=45818,
    ),
    ChainDefinition(
        chain_id=ChainId.ARBITRUM_SEPOLIA,
        name="Arbitrum Rollup Sepolia Testnet",
        explorer_url="https://sepolia.arbiscan.io",
        block_time=ARB_MINIMUM_BLOCK_TIME_IN_SECONDS,
        is_arbitrum=True,
        parent_chain_id=ChainId.SEPOLIA,
        child_chain_ids=[ChainId.STYLUS_TESTNET],
        confirm_period_blocks=20,
    ),
    ChainDefinition(
        chain_id=ChainId.STYLUS_TESTNET,
        name="Stylus Testnet",
        explorer_url="https://stylus-testnet-explorer.arbitrum.io",
        block_time=ARB_MINIMUM_BLOCK_TIME_IN_SECONDS,
        is_arbitrum=True,
        parent_chain_id=ChainId.ARBITRUM_SEPOLIA,
        confirm_period_blocks=20,
    ),
]

DEFAULT_LOCAL_L1 = ChainDefinition(
    chain_id=ChainId.LOCAL,
    name="Ethereum Local",
    explorer_url="http://34.142.175.48",
    block_time=10,
    child_chain_ids=[ChainId.ARBITRUM_LOCAL],
    is_custom=True,
)

DEFAULT_LOCAL_L2 = ChainDefinition(
    chain_id=ChainId.ARBITRUM_LOCAL,
    name="Arbitrum Local",
    explorer_url="http://34.142.175.48:4000",
    block_time=ARB_MINIMUM_BLOCK_TIME_IN_SECONDS,
    is_arbitrum=True,
    parent_chain_id=ChainId.LOCAL,
    child_chain_ids=[],  # Orbit chains go here
    confirm_period_blocks=20,
    is_custom=True,
)
