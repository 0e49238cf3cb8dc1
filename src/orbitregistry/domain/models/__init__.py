from orbitregistry.domain.models.chain import (
    ChainDefinition,
    ClassificationResult,
    CustomChainEntry,
    OrbitChainConfig,
    RegistrationResult,
)

__all__ = [
    "ChainDefinition",
    "ClassificationResult",
    "CustomChainEntry",
    "OrbitChainConfig",
    "RegistrationResult",
]
