"""Create domain service."""

from collections.abc import Mapping
from typing import Any

import logfire
from pydantic import BaseModel, Field

from storefront.application.service.base import ServiceBase
from storefront.application.service.contract import Validator
from storefront.application.service.error import ServiceError
from storefront.domain.error import RegistrarError
from storefront.domain.service import Registrar
from storefront.domain.value import AccountId, ContactId, ServiceId


class CreateDomainParams(BaseModel):
    """Params for registering a domain."""

    account_id: AccountId
    fqdn: str = Field(min_length=1)
    contact_id: str = Field(min_length=1)
    service_id: ServiceId


class CreateDomainService(ServiceBase):
    """Register a new domain with the registrar.

    Result is the ``RegisteredDomain``.
    """

    contract = CreateDomainParams

    class RegistrationFailed(ServiceError):
        """The registrar refused the registration."""

        pass

    def __init__(
        self,
        params: Mapping[str, Any] | None = None,
        *,
        registrar: Registrar,
        validator: Validator | None = None,
    ) -> None:
        super().__init__(params, validator=validator)
        self.registrar = registrar

    def execute(self) -> None:
        fqdn = self.values.fqdn
        try:
            self.result = self.registrar.create_domain(
                account_id=self.values.account_id,
                fqdn=fqdn,
                contact_id=ContactId(self.values.contact_id),
                service_id=self.values.service_id,
            )
        except RegistrarError as e:
            self.fail(
                f"Domain registration failed for {fqdn}",
                self.RegistrationFailed,
                {"fqdn": fqdn, "reason": str(e)},
            )

        logfire.info("Domain created", fqdn=fqdn, domain_id=self.result.id)
