"""Repository interfaces."""

from storefront.domain.repository.renewable_service import RenewableServiceRepository

__all__ = ["RenewableServiceRepository"]
