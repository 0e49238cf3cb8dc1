from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from orbitregistry.container import Container
from orbitregistry.registry.classifier import Classifier
from orbitregistry.registry.hierarchy import HierarchyResolver
from orbitregistry.registry.registry import ChainRegistry


@inject
def get_registry(
    registry: ChainRegistry = Depends(Provide[Container.registry]),
) -> ChainRegistry:
    return registry


def get_resolver(registry: ChainRegistry = Depends(get_registry)) -> HierarchyResolver:
    return HierarchyResolver(registry)


def get_classifier(registry: ChainRegistry = Depends(get_registry)) -> Classifier:
    return Classifier(registry.custom_chains)
