import pytest

from orbitregistry.catalog.catalog import ChainCatalog, is_listable
from orbitregistry.catalog.networks import BUILTIN_CHAINS, DEFAULT_LOCAL_L1, DEFAULT_LOCAL_L2
from orbitregistry.domain.enums import DEVNET_CHAIN_ID, ChainId
from orbitregistry.domain.models import ChainDefinition
from orbitregistry.exceptions import ChainRegistrationError


class TestListChains:
    def test_excludes_devnet_and_childless_roots(self):
        ids = [c.chain_id for c in ChainCatalog().list_chains()]
        assert DEVNET_CHAIN_ID not in ids
        assert ChainId.HOLESKY not in ids

    def test_preserves_catalog_order(self):
        ids = [c.chain_id for c in ChainCatalog().list_chains()]
        assert ids == [
            ChainId.ETHEREUM,
            ChainId.SEPOLIA,
            ChainId.ARBITRUM_ONE,
            ChainId.ARBITRUM_NOVA,
            ChainId.ARBITRUM_SEPOLIA,
            ChainId.STYLUS_TESTNET,
        ]

    def test_all_keeps_filtered_chains(self):
        ids = [c.chain_id for c in ChainCatalog().all()]
        assert DEVNET_CHAIN_ID in ids
        assert ChainId.HOLESKY in ids

    def test_rollup_without_children_is_listable(self):
        stylus = ChainCatalog().get(ChainId.STYLUS_TESTNET)
        assert stylus.child_chain_ids == []
        assert is_listable(stylus)


class TestCatalogIsolation:
    def test_catalogs_do_not_share_state(self):
        a = ChainCatalog()
        b = ChainCatalog()
        a.add_network(DEFAULT_LOCAL_L1, DEFAULT_LOCAL_L2)
        assert ChainId.ARBITRUM_LOCAL in a
        assert ChainId.ARBITRUM_LOCAL not in b

    def test_builtin_definitions_untouched_by_registration(self):
        catalog = ChainCatalog()
        parent = catalog.get(ChainId.ARBITRUM_SEPOLIA)
        child = ChainDefinition(
            chain_id=777001,
            name="L3",
            block_time=0.25,
            is_arbitrum=True,
            parent_chain_id=ChainId.ARBITRUM_SEPOLIA,
            confirm_period_blocks=20,
        )
        catalog.add_network(parent, child)

        builtin = next(c for c in BUILTIN_CHAINS if c.chain_id == ChainId.ARBITRUM_SEPOLIA)
        assert builtin.child_chain_ids == [ChainId.STYLUS_TESTNET]
        assert catalog.get(ChainId.ARBITRUM_SEPOLIA).child_chain_ids == [ChainId.STYLUS_TESTNET, 777001]

    def test_custom_chain_list(self):
        root = ChainDefinition(chain_id=5, name="Root", block_time=12, child_chain_ids=[6])
        rollup = ChainDefinition(chain_id=6, name="Rollup", block_time=1, is_arbitrum=True, parent_chain_id=5)
        catalog = ChainCatalog([root, rollup])
        assert [c.chain_id for c in catalog.list_chains()] == [5, 6]


class TestAddNetwork:
    def test_installs_pair(self):
        catalog = ChainCatalog()
        catalog.add_network(DEFAULT_LOCAL_L1, DEFAULT_LOCAL_L2)
        assert catalog.get(ChainId.LOCAL).child_chain_ids == [ChainId.ARBITRUM_LOCAL]
        assert catalog.get(ChainId.ARBITRUM_LOCAL).parent_chain_id == ChainId.LOCAL

    def test_re_registering_overwrites_without_duplicates(self):
        catalog = ChainCatalog()
        catalog.add_network(DEFAULT_LOCAL_L1, DEFAULT_LOCAL_L2)
        renamed = DEFAULT_LOCAL_L2.model_copy(update={"name": "Nitro Testnode"})
        catalog.add_network(DEFAULT_LOCAL_L1, renamed)

        assert catalog.get(ChainId.ARBITRUM_LOCAL).name == "Nitro Testnode"
        assert catalog.get(ChainId.LOCAL).child_chain_ids == [ChainId.ARBITRUM_LOCAL]

    def test_rejects_parent_mismatch(self):
        catalog = ChainCatalog()
        wrong_parent = DEFAULT_LOCAL_L2.model_copy(update={"parent_chain_id": 999})
        with pytest.raises(ChainRegistrationError):
            catalog.add_network(DEFAULT_LOCAL_L1, wrong_parent)
        assert ChainId.ARBITRUM_LOCAL not in catalog

    def test_rejects_root_as_child(self):
        catalog = ChainCatalog()
        with pytest.raises(ChainRegistrationError):
            catalog.add_network(DEFAULT_LOCAL_L1, DEFAULT_LOCAL_L1)
