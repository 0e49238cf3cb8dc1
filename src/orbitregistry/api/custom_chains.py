from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from orbitregistry.api.deps import get_registry
from orbitregistry.api.schemas.chains import dump_chain
from orbitregistry.api.schemas.custom_chains import CustomChainList
from orbitregistry.domain.enums import SUPPORTED_CUSTOM_ORBIT_PARENT_CHAINS
from orbitregistry.domain.models import CustomChainEntry
from orbitregistry.registry.registry import ChainRegistry

router = APIRouter(prefix="/api/custom-chains", tags=["custom-chains"])

RegistryDep = Annotated[ChainRegistry, Depends(get_registry)]


@router.get("", response_model=CustomChainList)
def list_custom_chains(registry: RegistryDep) -> JSONResponse:
    chains = registry.custom_chains.list()
    return JSONResponse({"chains": [dump_chain(chain) for chain in chains], "total": len(chains)})


@router.post("", response_model=CustomChainEntry, status_code=status.HTTP_201_CREATED)
def add_custom_chain(body: CustomChainEntry, registry: RegistryDep) -> CustomChainEntry:
    if body.chain_id in SUPPORTED_CUSTOM_ORBIT_PARENT_CHAINS:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Chain {body.chain_id} is reserved and cannot be added as a custom chain",
        )
    if not body.is_rollup:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Custom chain {body.chain_id} must settle to a parent chain",
        )

    entry = body.model_copy(update={"is_custom": True})
    if not registry.add_custom_chain(entry):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"Custom chain {body.chain_id} already exists")
    return entry


@router.delete("/{chain_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_custom_chain(chain_id: int, registry: RegistryDep) -> None:
    if not registry.remove_custom_chain(chain_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Custom chain not found")
