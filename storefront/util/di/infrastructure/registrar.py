"""Registrar infrastructure providers."""

from collections.abc import Iterator

from dishka import Scope, provide

from storefront.adapter.registrar import HttpRegistrar
from storefront.config import RegistrarSettings
from storefront.domain.service import Registrar
from storefront.util.di.base import ProviderBase
from storefront.util.error import ConfigurationError


class RegistrarProvider(ProviderBase):
    """Registrar component base."""

    __mock_component__ = "registrar"


class ProdRegistrarProvider(RegistrarProvider):
    """Production registrar provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_registrar(self, settings: RegistrarSettings) -> Iterator[Registrar]:
        """Provide registrar client, closed with the container.

        Raises:
            ConfigurationError: If the registrar base URL is not configured
        """
        if not settings.base_url:
            raise ConfigurationError("Registrar base URL must be configured")

        registrar = HttpRegistrar(
            base_url=settings.base_url,
            api_token=settings.api_token,
            timeout=settings.timeout,
        )
        yield registrar
        registrar.close()
