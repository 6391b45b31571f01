"""Strongly typed identifiers for storefront domain entities.

Local entities use UUIDs. Registrar-side identifiers are opaque strings
assigned by the registrar.
"""

from typing import NewType
from uuid import UUID

AccountId = NewType("AccountId", UUID)
ServiceId = NewType("ServiceId", UUID)
OrderItemId = NewType("OrderItemId", UUID)
CartItemId = NewType("CartItemId", UUID)
ContactId = NewType("ContactId", str)
DomainId = NewType("DomainId", str)
