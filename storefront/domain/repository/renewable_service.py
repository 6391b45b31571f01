"""Renewable service repository interface."""

from abc import ABC, abstractmethod

from storefront.domain.model.renewable_service import RenewableService
from storefront.domain.value import ServiceId


class RenewableServiceRepository(ABC):
    """Repository for RenewableService entity.

    Implementations live in the persistence layer.
    """

    @abstractmethod
    def find_by_id(self, service_id: ServiceId) -> RenewableService | None:
        """Find a renewable service by ID.

        Args:
            service_id: The service's unique identifier

        Returns:
            The service if found, None otherwise
        """
        pass

    @abstractmethod
    def save(self, service: RenewableService) -> RenewableService:
        """Save a renewable service (create or update).

        Args:
            service: The service to save

        Returns:
            The saved service
        """
        pass
