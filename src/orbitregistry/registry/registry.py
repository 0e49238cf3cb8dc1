"""ChainRegistry: merged view over the catalog and the custom chain store."""

import logging

from orbitregistry.catalog.catalog import ChainCatalog, is_listable
from orbitregistry.catalog.endpoints import EndpointTables, build_rpc_urls
from orbitregistry.config import Settings
from orbitregistry.domain.models import ChainDefinition, CustomChainEntry
from orbitregistry.exceptions import UnknownChainError
from orbitregistry.registry.custom_chains import CustomChainStore
from orbitregistry.storage.kv import KeyValueStore

logger = logging.getLogger(__name__)


class ChainRegistry:
    """Catalog + custom chains + endpoint tables, passed explicitly to every consumer.

    The catalog wins when a custom chain reuses a catalog ID. Custom chains are
    appended to their parent's children in store order.
    """

    def __init__(
        self,
        catalog: ChainCatalog,
        custom_chains: CustomChainStore,
        endpoints: EndpointTables | None = None,
    ) -> None:
        self.catalog = catalog
        self.custom_chains = custom_chains
        self.endpoints = endpoints if endpoints is not None else EndpointTables()

    def chains(self) -> list[ChainDefinition]:
        """Every chain in the merged registry, with custom children attached."""
        custom = [c for c in self.custom_chains.list() if c.chain_id not in self.catalog]
        merged: list[ChainDefinition] = [*self.catalog.all(), *custom]

        extra_children: dict[int, list[int]] = {}
        for chain in custom:
            if chain.parent_chain_id is not None:
                extra_children.setdefault(chain.parent_chain_id, []).append(chain.chain_id)

        if not extra_children:
            return merged
        return [self._with_children(chain, extra_children.get(chain.chain_id, [])) for chain in merged]

    def get_chain(self, chain_id: int) -> ChainDefinition | None:
        for chain in self.chains():
            if chain.chain_id == chain_id:
                return chain
        return None

    def list_chains(self) -> list[ChainDefinition]:
        """Chains offered to users: no devnet, no roots without rollups."""
        return [chain for chain in self.chains() if is_listable(chain)]

    def get_block_time(self, chain_id: int) -> float:
        chain = self.get_chain(chain_id)
        if chain is None:
            raise UnknownChainError(chain_id, "Couldn't get block time")
        return chain.block_time

    def get_confirm_period_blocks(self, chain_id: int) -> int:
        chain = self.get_chain(chain_id)
        if chain is None or not chain.is_rollup or chain.confirm_period_blocks is None:
            raise UnknownChainError(chain_id, "Couldn't get confirm period blocks")
        return chain.confirm_period_blocks

    def get_rpc_url(self, chain_id: int) -> str | None:
        return self.endpoints.get_rpc_url(chain_id)

    def get_explorer_url(self, chain_id: int) -> str:
        return self.endpoints.get_explorer_url(chain_id)

    def add_custom_chain(self, entry: CustomChainEntry) -> bool:
        """Persist a custom chain and expose its endpoints. False if already stored."""
        added = self.custom_chains.add(entry)
        if added:
            self.endpoints.map_custom_chain(entry)
            logger.info("Added custom chain %s (%s)", entry.chain_id, entry.name)
        return added

    def remove_custom_chain(self, chain_id: int) -> bool:
        removed = self.custom_chains.remove(chain_id)
        if removed:
            logger.info("Removed custom chain %s", chain_id)
        return removed

    def sync_custom_endpoints(self) -> None:
        """Map every stored custom chain into the endpoint tables."""
        for chain in self.custom_chains.list():
            self.endpoints.map_custom_chain(chain)

    @staticmethod
    def _with_children(chain: ChainDefinition, extra: list[int]) -> ChainDefinition:
        if not extra:
            return chain
        children = list(chain.child_chain_ids or [])
        for child_id in extra:
            if child_id not in children:
                children.append(child_id)
        return chain.model_copy(update={"child_chain_ids": children})


def build_registry(settings: Settings, kv_store: KeyValueStore) -> ChainRegistry:
    """Create a ChainRegistry over the built-in catalog and the configured store."""
    custom_chains = CustomChainStore(kv_store, key=settings.custom_chains_key)
    endpoints = EndpointTables(rpc_urls=build_rpc_urls(settings))
    registry = ChainRegistry(ChainCatalog(), custom_chains, endpoints)
    registry.sync_custom_endpoints()
    return registry
