from orbitregistry.domain.enums import ChainId
from orbitregistry.registry.classifier import Classifier, supported_chain_ids

XAI = 660279
XAI_TESTNET = 37714555429


class TestCoreChains:
    def test_ethereum_mainnet(self, classifier):
        result = classifier.classify(ChainId.ETHEREUM)
        assert result.is_ethereum_mainnet
        assert result.is_ethereum_mainnet_or_testnet
        assert result.is_core_chain
        assert not result.is_orbit_chain
        assert not result.is_testnet
        assert result.is_supported

    def test_arbitrum_one(self, classifier):
        result = classifier.classify(ChainId.ARBITRUM_ONE)
        assert result.is_arbitrum
        assert result.is_arbitrum_one
        assert result.is_core_chain
        assert not result.is_testnet
        assert result.is_supported

    def test_arbitrum_nova(self, classifier):
        result = classifier.classify(ChainId.ARBITRUM_NOVA)
        assert result.is_arbitrum_nova
        assert result.is_arbitrum
        assert not result.is_ethereum_mainnet_or_testnet

    def test_l1_testnets(self, classifier):
        for chain_id in (ChainId.SEPOLIA, ChainId.HOLESKY):
            result = classifier.classify(chain_id)
            assert result.is_ethereum_mainnet_or_testnet
            assert result.is_testnet
            assert result.is_supported
            assert result.is_core_chain
        assert classifier.classify(ChainId.SEPOLIA).is_sepolia
        assert classifier.classify(ChainId.HOLESKY).is_holesky

    def test_arbitrum_sepolia(self, classifier):
        result = classifier.classify(ChainId.ARBITRUM_SEPOLIA)
        assert result.is_arbitrum_sepolia
        assert result.is_arbitrum
        assert result.is_testnet
        assert result.is_supported

    def test_local_chains_are_unsupported_testnets(self, classifier):
        local = classifier.classify(ChainId.LOCAL)
        assert local.is_local
        assert local.is_core_chain
        assert local.is_testnet
        assert not local.is_supported

        arbitrum_local = classifier.classify(ChainId.ARBITRUM_LOCAL)
        assert arbitrum_local.is_arbitrum_local
        assert arbitrum_local.is_arbitrum
        assert arbitrum_local.is_testnet
        assert not arbitrum_local.is_supported


class TestOrbitChains:
    def test_unregistered_chain(self, classifier):
        result = classifier.classify(999999)
        assert not result.is_core_chain
        assert result.is_orbit_chain
        assert not result.is_supported
        assert not result.is_testnet

    def test_stylus_testnet(self, classifier):
        result = classifier.classify(ChainId.STYLUS_TESTNET)
        assert result.is_stylus_testnet
        assert result.is_orbit_chain
        assert result.is_testnet
        assert not result.is_supported

    def test_mainnet_orbit_table(self, classifier):
        result = classifier.classify(XAI)
        assert result.is_mainnet_orbit_chain
        assert result.is_orbit_chain
        assert result.is_supported
        assert not result.is_testnet

    def test_testnet_orbit_table(self, classifier):
        result = classifier.classify(XAI_TESTNET)
        assert result.is_testnet_orbit_chain
        assert result.is_testnet
        assert result.is_supported

    def test_custom_chain(self, classifier, custom_chains, make_chain):
        assert not classifier.classify(660001).is_supported
        custom_chains.add(make_chain(chain_id=660001))

        result = classifier.classify(660001)
        assert result.is_custom_orbit_chain
        assert result.is_orbit_chain
        assert result.is_testnet
        assert result.is_supported

    def test_reflects_removal(self, classifier, custom_chains, make_chain):
        custom_chains.add(make_chain(chain_id=660001))
        custom_chains.remove(660001)
        assert not classifier.classify(660001).is_custom_orbit_chain

    def test_malformed_stored_chain(self, classifier, make_record, store_records):
        store_records(make_record("660040", name=None, parentChainId="421614", childChainIds=None))
        result = classifier.classify(660040)
        assert result.is_custom_orbit_chain
        assert result.is_supported

    def test_injected_tables(self, custom_chains):
        classifier = Classifier(custom_chains, orbit_mainnets={}, orbit_testnets={})
        assert not classifier.classify(XAI).is_supported
        assert not classifier.classify(XAI_TESTNET).is_testnet


class TestDerivedFlags:
    def test_orbit_is_not_core(self, classifier):
        for chain_id in (1, 1337, 17000, 42161, 42170, 412346, 421614, 11155111, 23011913, XAI, 5):
            result = classifier.classify(chain_id)
            assert result.is_orbit_chain is not result.is_core_chain

    def test_camel_case_dump(self, classifier):
        data = classifier.classify(ChainId.ETHEREUM).model_dump(by_alias=True)
        assert data["isEthereumMainnet"] is True
        assert data["isCoreChain"] is True


class TestSupportedChainIds:
    def test_mainnets_by_default(self, registry, classifier):
        assert supported_chain_ids(registry, classifier) == [
            ChainId.ETHEREUM,
            ChainId.ARBITRUM_ONE,
            ChainId.ARBITRUM_NOVA,
        ]

    def test_testnets_only(self, registry, classifier):
        assert supported_chain_ids(registry, classifier, include_mainnets=False, include_testnets=True) == [
            ChainId.SEPOLIA,
            ChainId.ARBITRUM_SEPOLIA,
            ChainId.STYLUS_TESTNET,
        ]

    def test_both(self, registry, classifier):
        assert len(supported_chain_ids(registry, classifier, include_testnets=True)) == 6

    def test_neither(self, registry, classifier):
        assert supported_chain_ids(registry, classifier, include_mainnets=False) == []

    def test_custom_chains_count_as_testnets(self, registry, classifier, make_chain):
        registry.add_custom_chain(make_chain(chain_id=660001))
        testnets = supported_chain_ids(registry, classifier, include_mainnets=False, include_testnets=True)
        assert testnets[-1] == 660001
