"""Renewable service entity."""

from typing import Any

from pydantic import Field

from storefront.domain.model.common import DomainModel
from storefront.domain.value import AccountId, ServiceId


class RenewableService(DomainModel):
    """A subscription-style service owned by an account (hosting, domain, ...).

    ``data`` holds provisioning details; domain products store the registered
    domain under ``data["domain"]`` as ``{"fqdn": ..., "id": ...}``.
    """

    id: ServiceId
    account_id: AccountId
    name: str
    data: dict[str, Any] = Field(default_factory=dict)
