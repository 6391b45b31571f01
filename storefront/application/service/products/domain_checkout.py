"""Domain checkout service.

Checks out a domain product from the shopping cart: registers the domain (or
starts a transfer when the customer already owns it elsewhere) and records
it on the renewable service created for the order item.
"""

from collections.abc import Mapping
from functools import cached_property
from typing import Any, Optional

import logfire
from pydantic import BaseModel, Field

from storefront.application.service.base import ServiceBase
from storefront.application.service.contract import Validator
from storefront.application.service.domains import (
    CreateDomainService,
    InitiateTransferService,
)
from storefront.application.service.error import ServiceError, ValidationFailed
from storefront.domain.model import RenewableService, ShoppingCartItem
from storefront.domain.repository import RenewableServiceRepository
from storefront.domain.service import Registrar
from storefront.domain.value import AccountId, DomainId


class DomainCheckoutParams(BaseModel):
    """Params for checking out a domain product."""

    shopping_cart_item: ShoppingCartItem
    contact: dict[str, Any] = Field(min_length=1)


class DomainCheckoutService(ServiceBase):
    """Register or transfer the domain in a cart item.

    Result is the renewable service updated with the domain details.
    """

    contract = DomainCheckoutParams

    class MissingDomain(ServiceError):
        pass

    class MissingService(ServiceError):
        pass

    class MissingContact(ServiceError):
        pass

    class MissingTransferCode(ServiceError):
        pass

    class TransferFailed(ServiceError):
        """No domain id came back from the registrar."""

        pass

    class DelegationFailed(ServiceError):
        """A service this checkout delegates to failed."""

        pass

    def __init__(
        self,
        params: Mapping[str, Any] | None = None,
        *,
        registrar: Registrar,
        service_repository: RenewableServiceRepository,
        account_id: AccountId,
        validator: Validator | None = None,
    ) -> None:
        """Initialize domain checkout.

        Args:
            params: ``shopping_cart_item`` and ``contact``
            registrar: Registrar used by the delegated services
            service_repository: Store for the order item's renewable service
            account_id: Account checking out
            validator: Contract validator override
        """
        super().__init__(params, validator=validator)
        self.registrar = registrar
        self.service_repository = service_repository
        self.account_id = account_id
        self.domain_id: Optional[DomainId] = None

    def setup(self) -> None:
        # An injected validator may skip the contract
        if not isinstance(self.values, DomainCheckoutParams):
            self.fail(
                "Shopping cart item and contact are required", ValidationFailed
            )
        if not self.fqdn:
            self.fail("FQDN is required", self.MissingDomain)
        if self.associated_service is None:
            self.fail("Service was not created", self.MissingService)
        if not self.contact_id:
            self.fail("Contact is required", self.MissingContact)

    def execute(self) -> None:
        with logfire.span(
            "domain checkout", fqdn=self.fqdn, transfer=self.domain_transfer
        ):
            self._create_or_transfer_domain()
            self._verify_domain_transaction()
            self.result = self._update_service_with_domain_info()

    def _create_or_transfer_domain(self) -> None:
        if self.domain_transfer:
            return self._initiate_transfer_domain()

        self._create_new_domain()

    def _create_new_domain(self) -> None:
        domain = self._delegate(
            CreateDomainService(
                {
                    "account_id": self.account_id,
                    "fqdn": self.fqdn,
                    "contact_id": self.contact_id,
                    "service_id": self.associated_service.id,
                },
                registrar=self.registrar,
            )
        )

        self.domain_id = domain.id if domain else None

    def _initiate_transfer_domain(self) -> None:
        if not self.transfer_code:
            self.fail("Transfer code is required", self.MissingTransferCode)

        domains = self._delegate(
            InitiateTransferService(
                {
                    "account_id": self.account_id,
                    "domains": [
                        {
                            "fqdn": self.fqdn,
                            "transfer_code": self.transfer_code,
                            "service_id": self.associated_service.id,
                            "contact_id": self.contact_id,
                        }
                    ],
                },
                registrar=self.registrar,
            )
        )

        self.domain_id = domains[0].id if domains else None

    def _verify_domain_transaction(self) -> None:
        if not self.domain_id:
            self.fail(
                f"Transfer failed for {self.fqdn}",
                self.TransferFailed,
                {"fqdn": self.fqdn},
            )

    def _update_service_with_domain_info(self) -> RenewableService:
        service = self.associated_service
        updated = service.model_copy(
            update={
                "data": {
                    **service.data,
                    "domain": {"fqdn": self.fqdn, "id": self.domain_id},
                }
            }
        )
        return self.service_repository.save(updated)

    def _delegate(self, service: ServiceBase) -> Any:
        # Re-fail on this service so run() sees populated errors.
        try:
            return service.run()
        except ServiceError as e:
            self.fail(
                e.message,
                self.DelegationFailed,
                {"fqdn": self.fqdn, "cause": dict(e.errors)},
            )

    @cached_property
    def cart_item(self) -> ShoppingCartItem:
        return self.values.shopping_cart_item

    @cached_property
    def fqdn(self) -> Optional[str]:
        return self.cart_item.meta.get("domain") or None

    @cached_property
    def domain_transfer(self) -> bool:
        return self.cart_item.meta.get("is_transfer") is True

    @cached_property
    def transfer_code(self) -> Optional[str]:
        return self.cart_item.meta.get("transfer_code") or None

    @cached_property
    def contact_id(self) -> Optional[str]:
        data = self.values.contact.get("data")
        contact_id = data.get("id") if isinstance(data, dict) else None
        return str(contact_id) if contact_id else None

    @cached_property
    def associated_service(self) -> Optional[RenewableService]:
        order_item = self.cart_item.order_item
        if order_item is None or order_item.renewable_service_id is None:
            return None
        return self.service_repository.find_by_id(order_item.renewable_service_id)
