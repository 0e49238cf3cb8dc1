from orbitregistry.domain.enums.chain import DEVNET_CHAIN_ID, SUPPORTED_CUSTOM_ORBIT_PARENT_CHAINS, ChainId

__all__ = [
    "ChainId",
    "DEVNET_CHAIN_ID",
    "SUPPORTED_CUSTOM_ORBIT_PARENT_CHAINS",
]
