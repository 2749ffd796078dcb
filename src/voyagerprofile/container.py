"""Dependency injection container for profile resolution."""

from __future__ import annotations

from dependency_injector import containers, providers

from .adapters import VoyagerHTTPTransport
from .core import ProfileResolver
from .pipeline import ResolutionPipeline
from .schemas import ResolverConfig, TransportConfig, VoyagerContract


class ResolverContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    contract = providers.Singleton(VoyagerContract)
    resolver_config = providers.Singleton(ResolverConfig)
    transport_config = providers.Singleton(TransportConfig)

    transport = providers.Singleton(VoyagerHTTPTransport, config=transport_config)

    resolver = providers.Factory(
        ProfileResolver,
        contract=contract,
        transport=transport,
        strict_references=resolver_config.provided.strict_references,
    )

    pipeline = providers.Factory(
        ResolutionPipeline,
        resolver=resolver,
    )


def create_container(*, settings: dict | None = None) -> ResolverContainer:
    """Instantiate container with optional overrides."""

    container = ResolverContainer()

    if not settings or not isinstance(settings, dict):
        return container

    if settings.get("contract"):
        container.contract.override(
            providers.Singleton(VoyagerContract, **settings["contract"])
        )

    if settings.get("resolver"):
        container.resolver_config.override(
            providers.Singleton(ResolverConfig, **settings["resolver"])
        )

    if settings.get("transport"):
        container.transport_config.override(
            providers.Singleton(TransportConfig, **settings["transport"])
        )

    return container
