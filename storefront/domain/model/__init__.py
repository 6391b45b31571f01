"""Domain models."""

from storefront.domain.model.cart import OrderItem, ShoppingCartItem
from storefront.domain.model.common import DomainModel
from storefront.domain.model.registered_domain import RegisteredDomain
from storefront.domain.model.renewable_service import RenewableService

__all__ = [
    "DomainModel",
    "OrderItem",
    "RegisteredDomain",
    "RenewableService",
    "ShoppingCartItem",
]
