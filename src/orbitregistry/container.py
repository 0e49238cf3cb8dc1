from dependency_injector import containers, providers

from orbitregistry.config import Settings
from orbitregistry.db.repos.kv_repo import SqlKeyValueStore
from orbitregistry.db.session import build_engine, build_session_factory
from orbitregistry.registry.registrar import NetworkRegistrar
from orbitregistry.registry.registry import build_registry


class Container(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(modules=["orbitregistry.api.deps"])

    settings = providers.Singleton(Settings)

    engine = providers.Singleton(
        build_engine,
        database_url=settings.provided.database_url,
        echo=settings.provided.debug,
    )

    session_factory = providers.Singleton(
        build_session_factory,
        engine=engine,
    )

    kv_store = providers.Singleton(
        SqlKeyValueStore,
        session_factory=session_factory,
    )

    registry = providers.Singleton(
        build_registry,
        settings=settings,
        kv_store=kv_store,
    )

    registrar = providers.Factory(
        NetworkRegistrar,
        registry=registry,
        settings=settings,
    )
