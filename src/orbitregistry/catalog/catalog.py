"""ChainCatalog: runtime view of the built-in chain definitions."""

import logging

from orbitregistry.catalog.networks import BUILTIN_CHAINS
from orbitregistry.domain.enums import DEVNET_CHAIN_ID
from orbitregistry.domain.models import ChainDefinition
from orbitregistry.exceptions import ChainRegistrationError

logger = logging.getLogger(__name__)


def is_listable(chain: ChainDefinition) -> bool:
    """False for the devnet and for roots without any rollups settling to them."""
    if chain.chain_id == DEVNET_CHAIN_ID:
        return False
    if chain.is_root and not chain.child_chain_ids:
        return False
    return True


class ChainCatalog:
    """Chain ID → definition map, in enumeration order. Mutable only via add_network."""

    def __init__(self, chains: list[ChainDefinition] | None = None) -> None:
        source = BUILTIN_CHAINS if chains is None else chains
        self._chains: dict[int, ChainDefinition] = {}
        for chain in source:
            self._chains[chain.chain_id] = chain.model_copy(deep=True)

    def get(self, chain_id: int) -> ChainDefinition | None:
        return self._chains.get(chain_id)

    def all(self) -> list[ChainDefinition]:
        return list(self._chains.values())

    def __contains__(self, chain_id: object) -> bool:
        return chain_id in self._chains

    def list_chains(self) -> list[ChainDefinition]:
        return [chain for chain in self._chains.values() if is_listable(chain)]

    def add_network(self, parent: ChainDefinition, child: ChainDefinition) -> None:
        """Install a parent/child pair, overwriting earlier definitions with the same IDs.

        The child must be a rollup settling to ``parent``. The parent's child list
        gains the child's ID if it is not there yet.
        """
        if not child.is_rollup:
            raise ChainRegistrationError(f"Chain {child.chain_id} is not a rollup and cannot be a child chain")
        if child.parent_chain_id != parent.chain_id:
            raise ChainRegistrationError(
                f"Chain {child.chain_id} settles to {child.parent_chain_id}, not {parent.chain_id}"
            )

        children = list(parent.child_chain_ids)
        if child.chain_id not in children:
            children.append(child.chain_id)

        self._chains[parent.chain_id] = parent.model_copy(update={"child_chain_ids": children})
        self._chains[child.chain_id] = child.model_copy(deep=True)
        logger.info("Registered network %s (parent %s)", child.chain_id, parent.chain_id)
