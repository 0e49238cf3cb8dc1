from orbitregistry.domain.enums import DEVNET_CHAIN_ID, SUPPORTED_CUSTOM_ORBIT_PARENT_CHAINS, ChainId


class TestChainId:
    """ChainId uses (int, Enum) so members compare equal to raw chain IDs."""

    def test_is_int(self):
        assert isinstance(ChainId.ETHEREUM, int)
        assert ChainId.ETHEREUM == 1

    def test_lookup_by_value(self):
        assert ChainId(42161) is ChainId.ARBITRUM_ONE

    def test_values(self):
        assert ChainId.LOCAL == 1337
        assert ChainId.SEPOLIA == 11155111
        assert ChainId.HOLESKY == 17000
        assert ChainId.ARBITRUM_NOVA == 42170
        assert ChainId.ARBITRUM_SEPOLIA == 421614
        assert ChainId.ARBITRUM_LOCAL == 412346
        assert ChainId.STYLUS_TESTNET == 23011913

    def test_has_9(self):
        assert len(ChainId) == 9


class TestReservedIds:
    def test_supported_custom_orbit_parents(self):
        assert set(SUPPORTED_CUSTOM_ORBIT_PARENT_CHAINS) == {11155111, 17000, 421614}

    def test_devnet_not_a_known_chain(self):
        assert DEVNET_CHAIN_ID == 1338
        assert DEVNET_CHAIN_ID not in {c.value for c in ChainId}
