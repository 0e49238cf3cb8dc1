from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse

from orbitregistry.api.deps import get_classifier, get_registry, get_resolver
from orbitregistry.api.schemas.chains import (
    BaseChainResponse,
    ChainList,
    DestinationsResponse,
    SupportedChainsResponse,
    dump_chain,
)
from orbitregistry.domain.models import ChainDefinition, ClassificationResult
from orbitregistry.registry.classifier import Classifier, supported_chain_ids
from orbitregistry.registry.hierarchy import HierarchyResolver
from orbitregistry.registry.registry import ChainRegistry

router = APIRouter(prefix="/api/chains", tags=["chains"])

RegistryDep = Annotated[ChainRegistry, Depends(get_registry)]
ResolverDep = Annotated[HierarchyResolver, Depends(get_resolver)]
ClassifierDep = Annotated[Classifier, Depends(get_classifier)]


@router.get("", response_model=ChainList)
def list_chains(registry: RegistryDep) -> JSONResponse:
    chains = registry.list_chains()
    return JSONResponse({"chains": [dump_chain(chain) for chain in chains], "total": len(chains)})


@router.get("/supported", response_model=SupportedChainsResponse)
def list_supported_chains(
    registry: RegistryDep,
    classifier: ClassifierDep,
    mainnets: bool = Query(True),
    testnets: bool = Query(False),
) -> SupportedChainsResponse:
    chain_ids = supported_chain_ids(registry, classifier, include_mainnets=mainnets, include_testnets=testnets)
    return SupportedChainsResponse(chain_ids=chain_ids)


@router.get("/{chain_id}", response_model=ChainDefinition)
def get_chain(chain_id: int, registry: RegistryDep) -> JSONResponse:
    chain = registry.get_chain(chain_id)
    if chain is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Chain {chain_id} not found")
    return JSONResponse(dump_chain(chain))


@router.get("/{chain_id}/base", response_model=BaseChainResponse)
def get_base_chain(chain_id: int, resolver: ResolverDep) -> BaseChainResponse:
    """Root chain reached from chain_id; unknown IDs resolve to themselves."""
    ancestry = resolver.ancestry_of(chain_id)
    return BaseChainResponse(chain_id=chain_id, base_chain_id=ancestry[-1], ancestry=ancestry)


@router.get("/{chain_id}/destinations", response_model=DestinationsResponse)
def get_destinations(chain_id: int, resolver: ResolverDep) -> DestinationsResponse:
    return DestinationsResponse(chain_id=chain_id, destinations=resolver.destinations_of(chain_id))


@router.get("/{chain_id}/classification", response_model=ClassificationResult)
def classify_chain(chain_id: int, classifier: ClassifierDep) -> ClassificationResult:
    return classifier.classify(chain_id)
