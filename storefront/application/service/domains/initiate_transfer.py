"""Initiate transfer service."""

from collections.abc import Mapping
from typing import Any

import logfire
from pydantic import BaseModel, Field

from storefront.application.service.base import ServiceBase
from storefront.application.service.contract import Validator
from storefront.application.service.error import ServiceError
from storefront.domain.error import RegistrarError
from storefront.domain.service import Registrar, TransferRequest
from storefront.domain.value import AccountId, ServiceId


class TransferDomainParams(BaseModel):
    """One domain to transfer."""

    fqdn: str = Field(min_length=1)
    transfer_code: str = Field(min_length=1)
    service_id: ServiceId
    contact_id: str = Field(min_length=1)


class InitiateTransferParams(BaseModel):
    """Params for starting inbound transfers."""

    account_id: AccountId
    domains: list[TransferDomainParams] = Field(min_length=1)


class InitiateTransferService(ServiceBase):
    """Ask the registrar to transfer domains in.

    Result is the list of accepted transfers as ``RegisteredDomain`` objects,
    which may be shorter than the request when the registrar rejects some.
    """

    contract = InitiateTransferParams

    class TransferRejected(ServiceError):
        """The registrar refused the transfer request."""

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
        fqdns = [domain.fqdn for domain in self.values.domains]
        requests = [
            TransferRequest.model_validate(domain.model_dump())
            for domain in self.values.domains
        ]

        try:
            self.result = self.registrar.initiate_transfer(
                self.values.account_id, requests
            )
        except RegistrarError as e:
            self.fail(
                f"Transfer request failed for {', '.join(fqdns)}",
                self.TransferRejected,
                {"fqdns": fqdns, "reason": str(e)},
            )

        logfire.info(
            "Domain transfers initiated",
            requested=len(requests),
            accepted=len(self.result),
        )
