"""Exception hierarchy for chain registry lookups and registration."""


class OrbitRegistryError(Exception):
    """Base class for every error raised by the registry."""


class ParentChainNotFoundError(OrbitRegistryError):
    """A rollup names a parent chain that is not in the merged registry."""

    def __init__(self, chain_id: int, parent_chain_id: int) -> None:
        self.chain_id = chain_id
        self.parent_chain_id = parent_chain_id
        super().__init__(f"Parent chain {parent_chain_id} not found for {chain_id}")


class ChainCycleError(OrbitRegistryError):
    """Following parent links from a chain revisited a chain already seen."""

    def __init__(self, chain_id: int, path: list[int]) -> None:
        self.chain_id = chain_id
        self.path = path
        trail = " -> ".join(str(c) for c in path)
        super().__init__(f"Parent chain cycle detected for {chain_id}: {trail}")


class UnknownChainError(OrbitRegistryError):
    def __init__(self, chain_id: int, detail: str = "") -> None:
        self.chain_id = chain_id
        message = f"Unexpected chain ID: {chain_id}"
        if detail:
            message = f"{detail}. {message}"
        super().__init__(message)


class ChainRegistrationError(OrbitRegistryError):
    """The catalog refused a parent/child network pair."""
