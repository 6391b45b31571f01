"""Registrar port.

The registrar registers new domains and accepts incoming transfers. Service
objects depend on this interface; adapters implement it.
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel

from storefront.domain.model.registered_domain import RegisteredDomain
from storefront.domain.value import AccountId, ContactId, ServiceId


class TransferRequest(BaseModel):
    """One domain in a transfer request."""

    fqdn: str
    transfer_code: str
    service_id: ServiceId
    contact_id: ContactId


class Registrar(ABC):
    """Domain registrar interface."""

    @abstractmethod
    def create_domain(
        self,
        account_id: AccountId,
        fqdn: str,
        contact_id: ContactId,
        service_id: ServiceId,
    ) -> RegisteredDomain:
        """Register a new domain.

        Args:
            account_id: Account the domain is registered for
            fqdn: Fully qualified domain name
            contact_id: Registrant contact
            service_id: Renewable service the domain belongs to

        Returns:
            The registered domain

        Raises:
            RegistrarError: If the registration is refused or the request fails
        """
        pass

    @abstractmethod
    def initiate_transfer(
        self, account_id: AccountId, domains: list[TransferRequest]
    ) -> list[RegisteredDomain]:
        """Start transferring domains in from another registrar.

        The registrar may accept only some of the requested domains; rejected
        domains are missing from the returned list.

        Args:
            account_id: Account receiving the domains
            domains: Domains to transfer

        Returns:
            Accepted transfers

        Raises:
            RegistrarError: If the request fails
        """
        pass
