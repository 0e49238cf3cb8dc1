from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from orbitregistry.domain.models import CustomChainEntry


class CustomChainList(BaseModel):
    chains: list[CustomChainEntry]
    total: int

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
