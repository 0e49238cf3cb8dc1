from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///orbitregistry.db"
    debug: bool = False
    custom_chains_key: str = "arbitrum:custom:chains"
    infura_key: str = ""
    ethereum_rpc_url: str = ""
    sepolia_rpc_url: str = ""
    local_l1_rpc_url: str = "http://localhost:8545"
    local_l2_rpc_url: str = "http://localhost:8547"
    register_local_network: bool = False  # dev environments only

    class Config:
        env_file = ".env"
