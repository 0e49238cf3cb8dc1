"""Domain types for chain definitions, custom chains and classification."""

from pydantic import BaseModel, model_validator
from pydantic.alias_generators import to_camel


class ChainDefinition(BaseModel):
    """A network in the registry. Rollups settle to a parent; roots have none."""

    chain_id: int
    name: str
    explorer_url: str = ""
    block_time: float  # seconds
    is_arbitrum: bool = False  # True = rollup with a parent chain
    parent_chain_id: int | None = None
    child_chain_ids: list[int] = []
    confirm_period_blocks: int | None = None  # parent-chain blocks until finality
    is_custom: bool = False

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @model_validator(mode="after")
    def check_parent_link(self) -> "ChainDefinition":
        if self.is_arbitrum and self.parent_chain_id is None:
            raise ValueError(f"Rollup chain {self.chain_id} must declare a parent chain")
        if not self.is_arbitrum and self.parent_chain_id is not None:
            raise ValueError(f"Root chain {self.chain_id} cannot declare a parent chain")
        return self

    @property
    def is_rollup(self) -> bool:
        return self.is_arbitrum

    @property
    def is_root(self) -> bool:
        return not self.is_arbitrum


class CustomChainEntry(ChainDefinition):
    """A user-added chain, persisted with its RPC endpoint. Unknown keys are kept."""

    rpc_url: str
    slug: str | None = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True, "extra": "allow"}


class OrbitChainConfig(BaseModel):
    """A well-known Orbit chain listed in the static membership tables."""

    chain_id: int
    name: str
    slug: str
    parent_chain_id: int
    rpc_url: str
    explorer_url: str

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class ClassificationResult(BaseModel):
    """Boolean facts about one chain ID. Recomputed on every classify() call."""

    # L1
    is_ethereum_mainnet: bool
    is_ethereum_mainnet_or_testnet: bool
    # L1 testnets
    is_sepolia: bool
    is_holesky: bool
    is_local: bool
    # L2
    is_arbitrum: bool
    is_arbitrum_one: bool
    is_arbitrum_nova: bool
    # L2 testnets
    is_arbitrum_sepolia: bool
    is_arbitrum_local: bool
    # Orbit
    is_stylus_testnet: bool
    is_custom_orbit_chain: bool
    is_mainnet_orbit_chain: bool
    is_testnet_orbit_chain: bool
    is_orbit_chain: bool
    # General
    is_testnet: bool
    is_supported: bool
    is_core_chain: bool  # Ethereum or Arbitrum family

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class RegistrationResult(BaseModel):
    """Outcome of a two-phase network registration.

    Endpoint tables are written first and unconditionally; the catalog update
    may still fail afterwards, leaving ``registry_updated`` False.
    """

    endpoints_updated: bool
    registry_updated: bool
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.endpoints_updated and self.registry_updated
