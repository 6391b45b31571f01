"""Application layer DI providers."""

from dishka import Scope, provide

from storefront.application.service.factory import ServiceFactory
from storefront.domain.repository import RenewableServiceRepository
from storefront.domain.service import Registrar
from storefront.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_service_factory(
        self,
        registrar: Registrar,
        service_repository: RenewableServiceRepository,
    ) -> ServiceFactory:
        """Provide service object factory."""
        return ServiceFactory(
            registrar=registrar, service_repository=service_repository
        )
