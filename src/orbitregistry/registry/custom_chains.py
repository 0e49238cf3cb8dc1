"""CustomChainStore: user-added chains persisted as one JSON array."""

from __future__ import annotations

from typing import Iterable

from orbitregistry.domain.enums import SUPPORTED_CUSTOM_ORBIT_PARENT_CHAINS
from orbitregistry.domain.models import CustomChainEntry
from orbitregistry.registry.validation import decode_persisted_chains, encode_chains, validate_persisted_chains
from orbitregistry.storage.kv import KeyValueStore

CUSTOM_CHAINS_KEY = "arbitrum:custom:chains"


class CustomChainStore:
    """Add/remove/lookup over the persisted collection.

    Nothing is cached: every call re-reads the store, and every write replaces
    the whole array. Two writers interleaving read and write will clobber each
    other (last write wins).
    """

    def __init__(
        self,
        kv_store: KeyValueStore,
        key: str = CUSTOM_CHAINS_KEY,
        reserved_chain_ids: Iterable[int] = SUPPORTED_CUSTOM_ORBIT_PARENT_CHAINS,
    ) -> None:
        self._kv = kv_store
        self._key = key
        self._reserved = tuple(reserved_chain_ids)

    @property
    def key(self) -> str:
        return self._key

    def list(self) -> list[CustomChainEntry]:
        records = decode_persisted_chains(self._kv.get_item(self._key))
        return validate_persisted_chains(records, self._reserved)

    def chain_ids(self) -> list[int]:
        return [chain.chain_id for chain in self.list()]

    def find_by_id(self, chain_id: int) -> CustomChainEntry | None:
        for chain in self.list():
            if chain.chain_id == chain_id:
                return chain
        return None

    def add(self, entry: CustomChainEntry) -> bool:
        """Persist a new chain. Returns False (and writes nothing) if the ID exists."""
        chains = self.list()
        if any(chain.chain_id == entry.chain_id for chain in chains):
            return False
        chains.append(entry)
        self._write(chains)
        return True

    def remove(self, chain_id: int) -> bool:
        """Persist the collection without ``chain_id``. Returns whether it was present."""
        chains = self.list()
        remaining = [chain for chain in chains if chain.chain_id != chain_id]
        self._write(remaining)
        return len(remaining) != len(chains)

    def _write(self, chains: list[CustomChainEntry]) -> None:
        self._kv.set_item(self._key, encode_chains(chains))
