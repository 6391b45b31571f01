"""Domain registration services."""

from storefront.application.service.domains.create_domain import (
    CreateDomainParams,
    CreateDomainService,
)
from storefront.application.service.domains.initiate_transfer import (
    InitiateTransferParams,
    InitiateTransferService,
    TransferDomainParams,
)

__all__ = [
    "CreateDomainParams",
    "CreateDomainService",
    "InitiateTransferParams",
    "InitiateTransferService",
    "TransferDomainParams",
]
