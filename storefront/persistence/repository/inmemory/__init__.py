"""In-memory repository implementations."""

from .renewable_service import InMemoryRenewableServiceRepository

__all__ = ["InMemoryRenewableServiceRepository"]
