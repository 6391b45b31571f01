"""Repository implementations."""

from storefront.persistence.repository.inmemory import (
    InMemoryRenewableServiceRepository,
)

__all__ = ["InMemoryRenewableServiceRepository"]
