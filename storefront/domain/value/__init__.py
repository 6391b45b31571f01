"""Domain value objects for the storefront."""

from storefront.domain.value.identifiers import (
    AccountId,
    CartItemId,
    ContactId,
    DomainId,
    OrderItemId,
    ServiceId,
)

__all__ = [
    # Identifiers
    "AccountId",
    "CartItemId",
    "ContactId",
    "DomainId",
    "OrderItemId",
    "ServiceId",
]
