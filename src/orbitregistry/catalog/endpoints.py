"""RPC and explorer endpoint tables, plus static L2 gateway addresses."""

from orbitregistry.config import Settings
from orbitregistry.domain.enums import ChainId
from orbitregistry.domain.models import CustomChainEntry

INFURA_HOSTS: dict[int, str] = {
    ChainId.ETHEREUM: "mainnet",
    ChainId.SEPOLIA: "sepolia",
    ChainId.ARBITRUM_ONE: "arbitrum-mainnet",
    ChainId.ARBITRUM_SEPOLIA: "arbitrum-sepolia",
}

EXPLORER_URLS: dict[int, str] = {
    # L1
    ChainId.ETHEREUM: "https://etherscan.io",
    # L1 testnets
    ChainId.SEPOLIA: "https://sepolia.etherscan.io",
    ChainId.HOLESKY: "https://holesky.etherscan.io",
    # L2
    ChainId.ARBITRUM_NOVA: "https://nova.arbiscan.io",
    ChainId.ARBITRUM_ONE: "https://arbiscan.io",
    # L2 testnets
    ChainId.ARBITRUM_SEPOLIA: "https://sepolia.arbiscan.io",
    # Orbit testnets
    ChainId.STYLUS_TESTNET: "https://stylus-testnet-explorer.arbitrum.io",
}

# L2 gateway addresses for tokens bridged outside the standard gateway
L2_ARB_REVERSE_GATEWAY_ADDRESSES: dict[int, str] = {
    ChainId.ARBITRUM_ONE: "0xCaD7828a19b363A2B44717AFB1786B5196974D8E",
    ChainId.ARBITRUM_NOVA: "0xbf544970E6BD77b21C6492C281AB60d0770451F4",
}
L2_DAI_GATEWAY_ADDRESSES: dict[int, str] = {
    ChainId.ARBITRUM_ONE: "0x467194771dAe2967Aef3ECbEDD3Bf9a310C76C65",
    ChainId.ARBITRUM_NOVA: "0x10E6593CDda8c58a1d0f14C5164B376352a55f2F",
}
L2_WSTETH_GATEWAY_ADDRESSES: dict[int, str] = {
    ChainId.ARBITRUM_ONE: "0x07d4692291b9e30e326fd31706f686f83f331b82",
}
L2_LPT_GATEWAY_ADDRESSES: dict[int, str] = {
    ChainId.ARBITRUM_ONE: "0x6D2457a4ad276000A615295f7A80F79E48CcD318",
}
L2_MOON_GATEWAY_ADDRESSES: dict[int, str] = {
    ChainId.ARBITRUM_NOVA: "0xA430a792c14d3E49d9D00FD7B4BA343F516fbB81",
}


def infura_url(chain_id: int, infura_key: str) -> str:
    host = INFURA_HOSTS.get(chain_id)
    if host is None:
        raise ValueError(f"No Infura endpoint for chain {chain_id}")
    return f"https://{host}.infura.io/v3/{infura_key}"


def build_rpc_urls(settings: Settings) -> dict[int, str]:
    """Default RPC table. Explicit settings win, then Infura, then public RPCs."""
    key = settings.infura_key
    return {
        # L1
        ChainId.ETHEREUM: settings.ethereum_rpc_url or infura_url(ChainId.ETHEREUM, key),
        # L1 testnets
        ChainId.SEPOLIA: settings.sepolia_rpc_url or infura_url(ChainId.SEPOLIA, key),
        ChainId.HOLESKY: "https://ethereum-holesky-rpc.publicnode.com",
        # L2
        ChainId.ARBITRUM_ONE: infura_url(ChainId.ARBITRUM_ONE, key) if key else "https://arb1.arbitrum.io/rpc",
        ChainId.ARBITRUM_NOVA: "https://nova.arbitrum.io/rpc",
        # L2 testnets
        ChainId.ARBITRUM_SEPOLIA: (
            infura_url(ChainId.ARBITRUM_SEPOLIA, key) if key else "https://sepolia-rollup.arbitrum.io/rpc"
        ),
        # Orbit testnets
        ChainId.STYLUS_TESTNET: "https://stylus-testnet.arbitrum.io/rpc",
    }


class EndpointTables:
    """Mutable chain ID → URL maps for RPC and block explorer endpoints."""

    def __init__(self, rpc_urls: dict[int, str] | None = None, explorer_urls: dict[int, str] | None = None) -> None:
        self.rpc_urls: dict[int, str] = dict(rpc_urls or {})
        self.explorer_urls: dict[int, str] = dict(explorer_urls if explorer_urls is not None else EXPLORER_URLS)

    def get_rpc_url(self, chain_id: int) -> str | None:
        return self.rpc_urls.get(chain_id)

    def get_explorer_url(self, chain_id: int) -> str:
        """Explorer for a chain, defaulting to Etherscan."""
        return self.explorer_urls.get(chain_id) or EXPLORER_URLS[ChainId.ETHEREUM]

    def set_rpc_url(self, chain_id: int, url: str) -> None:
        self.rpc_urls[chain_id] = url

    def map_custom_chain(self, chain: CustomChainEntry) -> None:
        """Expose a custom chain's RPC and explorer URLs to network clients."""
        # unvalidated persisted records may lack either field
        rpc_url = getattr(chain, "rpc_url", None)
        explorer_url = getattr(chain, "explorer_url", None)
        if rpc_url:
            self.rpc_urls[chain.chain_id] = rpc_url
        if explorer_url:
            self.explorer_urls[chain.chain_id] = explorer_url
