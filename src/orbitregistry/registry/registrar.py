"""NetworkRegistrar: installs a local L1/L2 development pair into a registry."""

import logging

from orbitregistry.catalog.networks import DEFAULT_LOCAL_L1, DEFAULT_LOCAL_L2
from orbitregistry.config import Settings
from orbitregistry.domain.models import ChainDefinition, RegistrationResult
from orbitregistry.registry.registry import ChainRegistry

logger = logging.getLogger(__name__)


class NetworkRegistrar:
    """Two-phase, best-effort registration of development networks.

    Phase 1 points both chains' RPC endpoints at the local node URLs and always
    happens. Phase 2 adds the pair to the catalog; a failure there is logged and
    reported in the result, never raised.
    """

    def __init__(self, registry: ChainRegistry, settings: Settings) -> None:
        self._registry = registry
        self._settings = settings

    def register_local(
        self,
        l1: ChainDefinition | None = None,
        l2: ChainDefinition | None = None,
        l1_rpc_url: str | None = None,
        l2_rpc_url: str | None = None,
    ) -> RegistrationResult:
        l1 = l1 or DEFAULT_LOCAL_L1
        l2 = l2 or DEFAULT_LOCAL_L2

        endpoints = self._registry.endpoints
        endpoints.set_rpc_url(l1.chain_id, l1_rpc_url or self._settings.local_l1_rpc_url)
        endpoints.set_rpc_url(l2.chain_id, l2_rpc_url or self._settings.local_l2_rpc_url)

        try:
            self._registry.catalog.add_network(l1, l2)
        except Exception as exc:
            logger.exception("Failed to register local network: %s", exc)
            return RegistrationResult(endpoints_updated=True, registry_updated=False, error=str(exc))

        return RegistrationResult(endpoints_updated=True, registry_updated=True)
