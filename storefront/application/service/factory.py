"""Service object factory."""

from collections.abc import Mapping
from typing import Any

from storefront.application.service.domains import (
    CreateDomainService,
    InitiateTransferService,
)
from storefront.application.service.products import DomainCheckoutService
from storefront.domain.repository import RenewableServiceRepository
from storefront.domain.service import Registrar
from storefront.domain.value import AccountId


class ServiceFactory:
    """Builds service objects with their collaborators.

    Service objects are single-use, so callers get a fresh one per call.
    """

    def __init__(
        self,
        registrar: Registrar,
        service_repository: RenewableServiceRepository,
    ) -> None:
        self.registrar = registrar
        self.service_repository = service_repository

    def create_domain(self, params: Mapping[str, Any]) -> CreateDomainService:
        return CreateDomainService(params, registrar=self.registrar)

    def initiate_transfer(self, params: Mapping[str, Any]) -> InitiateTransferService:
        return InitiateTransferService(params, registrar=self.registrar)

    def domain_checkout(
        self, params: Mapping[str, Any], account_id: AccountId
    ) -> DomainCheckoutService:
        return DomainCheckoutService(
            params,
            registrar=self.registrar,
            service_repository=self.service_repository,
            account_id=account_id,
        )
