"""Persistence infrastructure providers."""

from dishka import Scope, provide

from storefront.domain.repository import RenewableServiceRepository
from storefront.persistence.repository import InMemoryRenewableServiceRepository
from storefront.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence provider - concrete, backed by in-memory repositories."""

    @provide(scope=Scope.APP)
    def get_renewable_service_repository(self) -> RenewableServiceRepository:
        """Provide RenewableService repository."""
        return InMemoryRenewableServiceRepository()
