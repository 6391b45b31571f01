"""In-memory renewable service repository."""

from typing import Optional

from storefront.domain.model.renewable_service import RenewableService
from storefront.domain.repository.renewable_service import RenewableServiceRepository
from storefront.domain.value import ServiceId


class InMemoryRenewableServiceRepository(RenewableServiceRepository):
    """In-memory implementation of RenewableServiceRepository."""

    def __init__(self) -> None:
        self._services: dict[ServiceId, RenewableService] = {}

    def find_by_id(self, service_id: ServiceId) -> Optional[RenewableService]:
        """Find a renewable service by ID."""
        return self._services.get(service_id)

    def save(self, service: RenewableService) -> RenewableService:
        """Save a renewable service (create or update)."""
        self._services[service.id] = service
        return service
