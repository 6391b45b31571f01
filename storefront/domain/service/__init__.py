"""Domain service interfaces."""

from storefront.domain.service.registrar import Registrar, TransferRequest

__all__ = ["Registrar", "TransferRequest"]
