"""Registered domain entity."""

from storefront.domain.model.common import DomainModel
from storefront.domain.value import DomainId


class RegisteredDomain(DomainModel):
    """Domain as known to the registrar after a registration or transfer request."""

    id: DomainId
    fqdn: str
    status: str = "pending"
