from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from orbitregistry.domain.models import ChainDefinition


class CamelModel(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class ChainList(CamelModel):
    chains: list[ChainDefinition]
    total: int


class BaseChainResponse(CamelModel):
    chain_id: int
    base_chain_id: int
    ancestry: list[int]  # chain first, base chain last


class DestinationsResponse(CamelModel):
    chain_id: int
    destinations: list[int]  # parent first when present


class SupportedChainsResponse(CamelModel):
    chain_ids: list[int]


def dump_chain(chain: ChainDefinition) -> dict:
    """Wire form of a chain. Custom chains kept without validation are dumped as stored."""
    return chain.model_dump(mode="json", by_alias=True)
