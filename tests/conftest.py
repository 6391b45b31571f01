"""Test configuration and fixtures."""

from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire
import pytest

from storefront.domain.model import OrderItem, RenewableService, ShoppingCartItem
from storefront.domain.value import AccountId, CartItemId, OrderItemId, ServiceId


@pytest.fixture(scope="session", autouse=True)
def configure_test_logfire():
    """Keep Logfire local and quiet during tests."""
    logfire.configure(send_to_logfire=False, console=False)


def make_renewable_service(account_id: AccountId, **data: Any) -> RenewableService:
    """Helper to build a renewable service for a domain product."""
    return RenewableService(
        id=ServiceId(uuid4()),
        account_id=account_id,
        name=f"Domain {datetime.now():%Y-%m-%d}",
        data=dict(data),
    )


def make_cart_item(
    service_id: ServiceId | None = None,
    **meta: Any,
) -> ShoppingCartItem:
    """Helper to build a domain cart item.

    Args:
        service_id: Renewable service provisioned for the order item
        **meta: Product metadata (domain, is_transfer, transfer_code)

    Returns:
        Shopping cart item, with an order item only when service_id is given
    """
    order_item = (
        OrderItem(id=OrderItemId(uuid4()), renewable_service_id=service_id)
        if service_id is not None
        else None
    )
    return ShoppingCartItem(
        id=CartItemId(uuid4()),
        data={"meta": meta},
        order_item=order_item,
    )
