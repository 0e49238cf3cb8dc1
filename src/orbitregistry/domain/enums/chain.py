from enum import Enum


class ChainId(int, Enum):
    """Well-known chain IDs. Int-valued so members compare equal to raw IDs."""

    # L1
    ETHEREUM = 1
    # L1 testnets
    LOCAL = 1337
    SEPOLIA = 11155111
    HOLESKY = 17000
    # L2
    ARBITRUM_ONE = 42161
    ARBITRUM_NOVA = 42170
    # L2 testnets
    ARBITRUM_SEPOLIA = 421614
    ARBITRUM_LOCAL = 412346
    # Orbit
    STYLUS_TESTNET = 23011913


# Parent chains a user-added Orbit chain may settle to. A custom chain can
# never claim one of these IDs for itself.
SUPPORTED_CUSTOM_ORBIT_PARENT_CHAINS: tuple[int, ...] = (
    ChainId.SEPOLIA,
    ChainId.HOLESKY,
    ChainId.ARBITRUM_SEPOLIA,
)

# Mainnet-fork devnet shipped in the catalog but never offered to users
DEVNET_CHAIN_ID = 1338
