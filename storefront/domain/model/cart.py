"""Shopping cart entities.

A cart item carries free-form product data. For domain products the
``meta`` section holds the domain name and transfer details::

    {"meta": {"domain": "example.com", "is_transfer": true, "transfer_code": "X1"}}
"""

from typing import Any, Optional

from pydantic import Field

from storefront.domain.model.common import DomainModel
from storefront.domain.value import CartItemId, OrderItemId, ServiceId


class OrderItem(DomainModel):
    """Order line created when a cart is checked out.

    Business rules:
    - A renewable service is provisioned for the order item before checkout
      of the product runs
    """

    id: OrderItemId
    renewable_service_id: Optional[ServiceId] = None


class ShoppingCartItem(DomainModel):
    """Item in a customer's shopping cart."""

    id: CartItemId
    data: dict[str, Any] = Field(default_factory=dict)
    order_item: Optional[OrderItem] = None

    @property
    def meta(self) -> dict[str, Any]:
        """Product metadata, empty when absent or malformed."""
        meta = self.data.get("meta")
        return meta if isinstance(meta, dict) else {}
