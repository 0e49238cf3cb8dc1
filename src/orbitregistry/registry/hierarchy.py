"""HierarchyResolver: parent, base-chain and bridging-destination lookups."""

from orbitregistry.domain.models import ChainDefinition
from orbitregistry.exceptions import ChainCycleError, ParentChainNotFoundError
from orbitregistry.registry.registry import ChainRegistry


class HierarchyResolver:
    """Walks parent links in a ChainRegistry.

    Unknown chain IDs are not errors: base_chain_of returns them unchanged and
    destinations_of returns []. A parent ID missing from the registry is.
    A rollup persisted without a parent ends the walk at itself.
    """

    def __init__(self, registry: ChainRegistry) -> None:
        self._registry = registry

    def parent_of(self, chain: ChainDefinition) -> ChainDefinition:
        if chain.parent_chain_id is None:
            raise ValueError(f"Chain {chain.chain_id} is a root chain and has no parent")
        parent = self._registry.get_chain(chain.parent_chain_id)
        if parent is None:
            raise ParentChainNotFoundError(chain.chain_id, chain.parent_chain_id)
        return parent

    def ancestry_of(self, chain_id: int) -> list[int]:
        """Chain IDs from ``chain_id`` up to and including its base chain."""
        by_id = {chain.chain_id: chain for chain in self._registry.chains()}
        chain = by_id.get(chain_id)
        if chain is None:
            return [chain_id]

        path = [chain.chain_id]
        seen = {chain.chain_id}
        while chain.is_rollup and chain.parent_chain_id is not None:
            parent = by_id.get(chain.parent_chain_id)
            if parent is None:
                raise ParentChainNotFoundError(chain.chain_id, chain.parent_chain_id)
            if parent.chain_id in seen:
                raise ChainCycleError(chain_id, [*path, parent.chain_id])
            path.append(parent.chain_id)
            seen.add(parent.chain_id)
            chain = parent
        return path

    def base_chain_of(self, chain_id: int) -> int:
        """The root chain reached by following parents; the input itself for roots and unknowns."""
        return self.ancestry_of(chain_id)[-1]

    def destinations_of(self, chain_id: int) -> list[int]:
        """Chains one bridging hop away. The parent, when there is one, always comes first."""
        chain = next((c for c in self._registry.list_chains() if c.chain_id == chain_id), None)
        if chain is None:
            return []

        children = list(chain.child_chain_ids or [])
        if chain.is_rollup and chain.parent_chain_id is not None:
            return [chain.parent_chain_id, *children]
        return children
