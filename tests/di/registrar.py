"""Mock registrar providers for testing."""

from dishka import Scope, provide

from storefront.adapter.registrar import MockRegistrar
from storefront.domain.service import Registrar
from storefront.util.di.infrastructure.registrar import RegistrarProvider


class MockRegistrarProvider(RegistrarProvider):
    """Mock registrar provider using the in-process registrar."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_registrar(self) -> Registrar:
        """Provide mock registrar."""
        return MockRegistrar()
