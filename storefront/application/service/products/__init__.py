"""Product checkout services."""

from storefront.application.service.products.domain_checkout import (
    DomainCheckoutParams,
    DomainCheckoutService,
)

__all__ = ["DomainCheckoutParams", "DomainCheckoutService"]
