"""Registrar API client implementation.

Talks JSON over HTTPS to the registrar's REST API:

- ``POST {base_url}/domains`` registers a domain
- ``POST {base_url}/domains/transfers`` starts inbound transfers
"""

from typing import Any
from uuid import NAMESPACE_DNS, uuid5

import httpx
import logfire

from storefront.adapter.error import ProviderError
from storefront.domain.error import RegistrarError
from storefront.domain.model.registered_domain import RegisteredDomain
from storefront.domain.service.registrar import Registrar, TransferRequest
from storefront.domain.value import AccountId, ContactId, DomainId, ServiceId


class RegistrarRequestError(ProviderError, RegistrarError):
    """Registrar request failed or returned an unusable response."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class HttpRegistrar(Registrar):
    """Registrar client backed by httpx."""

    def __init__(
        self,
        base_url: str,
        api_token: str,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize registrar client.

        Args:
            base_url: Registrar API base URL
            api_token: Bearer token for the registrar API
            timeout: Request timeout in seconds
            client: Preconfigured httpx client (one is created when omitted)
        """
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout)
        self._headers = {
            "Authorization": f"Bearer {api_token}",
            "Accept": "application/json",
        }

    def create_domain(
        self,
        account_id: AccountId,
        fqdn: str,
        contact_id: ContactId,
        service_id: ServiceId,
    ) -> RegisteredDomain:
        """Register a new domain.

        Raises:
            RegistrarRequestError: If the registrar rejects the request
        """
        payload = {
            "account_id": str(account_id),
            "fqdn": fqdn,
            "contact_id": contact_id,
            "service_id": str(service_id),
        }
        domain = self._to_domain(self._post("/domains", payload))

        logfire.info("Domain registration requested", fqdn=fqdn, domain_id=domain.id)

        return domain

    def initiate_transfer(
        self, account_id: AccountId, domains: list[TransferRequest]
    ) -> list[RegisteredDomain]:
        """Start inbound transfers.

        Raises:
            RegistrarRequestError: If the registrar rejects the request
        """
        payload = {
            "account_id": str(account_id),
            "domains": [domain.model_dump(mode="json") for domain in domains],
        }
        data = self._post("/domains/transfers", payload)

        if not isinstance(data, list):
            raise RegistrarRequestError("Unexpected transfer response from registrar")

        logfire.info(
            "Domain transfer requested",
            requested=len(domains),
            accepted=len(data),
        )

        return [self._to_domain(item) for item in data]

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def _post(self, path: str, payload: dict[str, Any]) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self._client.post(url, json=payload, headers=self._headers)
        except httpx.HTTPError as e:
            logfire.error("Registrar HTTP error", url=url, error=str(e))
            raise RegistrarRequestError(f"HTTP error calling registrar: {e}") from e

        if response.status_code not in (200, 201, 202):
            logfire.error(
                "Registrar request failed",
                url=url,
                status_code=response.status_code,
                error=response.text,
            )
            raise RegistrarRequestError(
                f"Registrar request failed: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise RegistrarRequestError("Registrar returned invalid JSON") from e

    @staticmethod
    def _to_domain(data: Any) -> RegisteredDomain:
        if not isinstance(data, dict) or not data.get("id"):
            raise RegistrarRequestError("Registrar response is missing a domain id")
        return RegisteredDomain(
            id=DomainId(str(data["id"])),
            fqdn=data.get("fqdn", ""),
            status=data.get("status", "pending"),
        )


class MockRegistrar(Registrar):
    """Mock registrar for testing.

    Returns deterministic domain ids without making real API calls. Domains
    listed in ``unavailable`` are refused on registration and dropped from
    transfer results.
    """

    def __init__(self, unavailable: set[str] | None = None) -> None:
        self.unavailable: set[str] = set(unavailable or ())
        self.created: list[dict[str, Any]] = []
        self.transfers: list[dict[str, Any]] = []

    def create_domain(
        self,
        account_id: AccountId,
        fqdn: str,
        contact_id: ContactId,
        service_id: ServiceId,
    ) -> RegisteredDomain:
        if fqdn in self.unavailable:
            raise RegistrarRequestError(
                f"Domain {fqdn} is not available", status_code=422
            )

        self.created.append(
            {
                "account_id": account_id,
                "fqdn": fqdn,
                "contact_id": contact_id,
                "service_id": service_id,
            }
        )
        return RegisteredDomain(id=self.domain_id_for(fqdn), fqdn=fqdn, status="active")

    def initiate_transfer(
        self, account_id: AccountId, domains: list[TransferRequest]
    ) -> list[RegisteredDomain]:
        self.transfers.append({"account_id": account_id, "domains": list(domains)})
        return [
            RegisteredDomain(
                id=self.domain_id_for(domain.fqdn),
                fqdn=domain.fqdn,
                status="pending_transfer",
            )
            for domain in domains
            if domain.fqdn not in self.unavailable
        ]

    @staticmethod
    def domain_id_for(fqdn: str) -> DomainId:
        """Deterministic domain id for a name."""
        return DomainId(f"dom_{uuid5(NAMESPACE_DNS, fqdn).hex[:12]}")
