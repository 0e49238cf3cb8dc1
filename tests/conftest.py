import json

import pytest

from orbitregistry.catalog.catalog import ChainCatalog
from orbitregistry.catalog.endpoints import EndpointTables, build_rpc_urls
from orbitregistry.config import Settings
from orbitregistry.domain.enums import ChainId
from orbitregistry.domain.models import CustomChainEntry
from orbitregistry.registry.classifier import Classifier
from orbitregistry.registry.custom_chains import CUSTOM_CHAINS_KEY, CustomChainStore
from orbitregistry.registry.hierarchy import HierarchyResolver
from orbitregistry.registry.registry import ChainRegistry
from orbitregistry.storage.kv import InMemoryKeyValueStore


def make_custom_chain(
    chain_id: int = 660001,
    parent_chain_id: int = ChainId.ARBITRUM_SEPOLIA,
    name: str = "Test Orbit",
    **overrides,
) -> CustomChainEntry:
    fields = {
        "chain_id": chain_id,
        "name": name,
        "explorer_url": f"https://explorer.{chain_id}.example",
        "rpc_url": f"https://rpc.{chain_id}.example",
        "block_time": 0.25,
        "is_arbitrum": True,
        "parent_chain_id": parent_chain_id,
        "confirm_period_blocks": 150,
        "is_custom": True,
    }
    fields.update(overrides)
    return CustomChainEntry(**fields)


@pytest.fixture()
def make_chain():
    return make_custom_chain


def make_stored_record(chain_id=660001, **overrides) -> dict:
    """A custom chain as persisted, camelCase keys and all."""
    record = {
        "chainId": chain_id,
        "name": "Orbit",
        "explorerUrl": "https://explorer.example",
        "rpcUrl": "https://rpc.example",
        "blockTime": 0.25,
        "isArbitrum": True,
        "parentChainId": ChainId.ARBITRUM_SEPOLIA.value,
        "childChainIds": [],
        "confirmPeriodBlocks": 150,
        "isCustom": True,
    }
    record.update(overrides)
    return record


@pytest.fixture()
def make_record():
    return make_stored_record


@pytest.fixture()
def store_records(kv_store):
    """Write raw records straight into the store, bypassing CustomChainStore.add."""

    def _store(*records) -> None:
        kv_store.set_item(CUSTOM_CHAINS_KEY, json.dumps(list(records)))

    return _store


@pytest.fixture()
def settings():
    return Settings(_env_file=None, infura_key="test-key")


@pytest.fixture()
def kv_store():
    return InMemoryKeyValueStore()


@pytest.fixture()
def custom_chains(kv_store):
    return CustomChainStore(kv_store)


@pytest.fixture()
def registry(settings, custom_chains):
    return ChainRegistry(ChainCatalog(), custom_chains, EndpointTables(rpc_urls=build_rpc_urls(settings)))


@pytest.fixture()
def resolver(registry):
    return HierarchyResolver(registry)


@pytest.fixture()
def classifier(custom_chains):
    return Classifier(custom_chains)
