"""Unit tests for DomainCheckoutService."""

from uuid import uuid4

import pytest

from storefront.application.service import NoContractValidator, ValidationFailed
from storefront.application.service.factory import ServiceFactory
from storefront.application.service.products import DomainCheckoutService
from storefront.domain.repository import RenewableServiceRepository
from storefront.domain.service import Registrar
from storefront.domain.value import AccountId
from tests.conftest import make_cart_item, make_renewable_service
from tests.harness import create_env_fixture

# Unit test fixture - registrar mocked
unit_env = create_env_fixture()

CONTACT = {"data": {"id": "contact-42", "name": "Jane Doe"}}


class TestDomainCheckoutService:
    """Tests for DomainCheckoutService."""

    def _setup(self, unit_env):
        """Resolve collaborators and store a renewable service for the order item."""
        factory = unit_env.get(ServiceFactory)
        registrar = unit_env.get(Registrar)
        repository = unit_env.get(RenewableServiceRepository)
        account_id = AccountId(uuid4())
        service = repository.save(
            make_renewable_service(account_id, plan="domain-basic")
        )
        return factory, registrar, repository, account_id, service

    def test_checkout_new_domain(self, unit_env):
        """A new domain should be registered and recorded on the service."""
        # Arrange
        factory, registrar, repository, account_id, service = self._setup(unit_env)
        item = make_cart_item(service.id, domain="example.com")

        # Act
        result = factory.domain_checkout(
            {"shopping_cart_item": item, "contact": CONTACT}, account_id
        ).run()

        # Assert
        domain_id = registrar.domain_id_for("example.com")
        assert result.data["domain"] == {"fqdn": "example.com", "id": domain_id}
        assert result.data["plan"] == "domain-basic"
        assert repository.find_by_id(service.id) == result
        assert registrar.created[0]["contact_id"] == "contact-42"
        assert registrar.created[0]["service_id"] == service.id
        assert registrar.created[0]["account_id"] == account_id
        assert registrar.transfers == []

    def test_checkout_transfer(self, unit_env):
        """A transfer item should start a transfer with its code."""
        factory, registrar, repository, account_id, service = self._setup(unit_env)
        item = make_cart_item(
            service.id, domain="moving.com", is_transfer=True, transfer_code="EPP-9"
        )

        result = factory.domain_checkout(
            {"shopping_cart_item": item, "contact": CONTACT}, account_id
        ).run()

        assert result.data["domain"]["id"] == registrar.domain_id_for("moving.com")
        transfer = registrar.transfers[0]["domains"][0]
        assert transfer.fqdn == "moving.com"
        assert transfer.transfer_code == "EPP-9"
        assert transfer.service_id == service.id
        assert registrar.created == []

    def test_transfer_flag_must_be_true(self, unit_env):
        """Only a literal true is_transfer flag selects the transfer path."""
        factory, registrar, _, account_id, service = self._setup(unit_env)
        item = make_cart_item(service.id, domain="example.org", is_transfer="yes")

        factory.domain_checkout(
            {"shopping_cart_item": item, "contact": CONTACT}, account_id
        ).run()

        assert [c["fqdn"] for c in registrar.created] == ["example.org"]
        assert registrar.transfers == []

    def test_missing_domain_fails_in_setup(self, unit_env):
        """A cart item without a domain should fail before contacting the registrar."""
        factory, registrar, _, account_id, service = self._setup(unit_env)
        item = make_cart_item(service.id)

        with pytest.raises(
            DomainCheckoutService.MissingDomain, match="FQDN is required"
        ):
            factory.domain_checkout(
                {"shopping_cart_item": item, "contact": CONTACT}, account_id
            ).run()

        assert registrar.created == []

    def test_missing_service_fails_in_setup(self, unit_env):
        """An order item without a stored renewable service should fail."""
        factory, registrar, _, account_id, _ = self._setup(unit_env)
        item = make_cart_item(uuid4(), domain="example.com")

        with pytest.raises(DomainCheckoutService.MissingService) as exc_info:
            factory.domain_checkout(
                {"shopping_cart_item": item, "contact": CONTACT}, account_id
            ).run()

        assert exc_info.value.errors["error"] == "Service was not created"
        assert registrar.created == []

    def test_missing_contact_id_fails_in_setup(self, unit_env):
        """A contact without an id should fail."""
        factory, _, _, account_id, service = self._setup(unit_env)
        item = make_cart_item(service.id, domain="example.com")

        with pytest.raises(DomainCheckoutService.MissingContact):
            factory.domain_checkout(
                {"shopping_cart_item": item, "contact": {"data": {}}}, account_id
            ).run()

    def test_transfer_without_code_fails(self, unit_env):
        """Transfers need a transfer code."""
        factory, registrar, _, account_id, service = self._setup(unit_env)
        item = make_cart_item(service.id, domain="moving.com", is_transfer=True)

        with pytest.raises(
            DomainCheckoutService.MissingTransferCode, match="Transfer code is required"
        ):
            factory.domain_checkout(
                {"shopping_cart_item": item, "contact": CONTACT}, account_id
            ).run()

        assert registrar.transfers == []

    def test_rejected_transfer_fails_with_fqdn(self, unit_env):
        """No domain id back from a transfer should fail with the fqdn in context."""
        factory, registrar, repository, account_id, service = self._setup(unit_env)
        registrar.unavailable.add("locked.com")
        item = make_cart_item(
            service.id, domain="locked.com", is_transfer=True, transfer_code="EPP-1"
        )

        with pytest.raises(DomainCheckoutService.TransferFailed) as exc_info:
            factory.domain_checkout(
                {"shopping_cart_item": item, "contact": CONTACT}, account_id
            ).run()

        errors = exc_info.value.errors
        assert errors["error"] == "Transfer failed for locked.com"
        assert errors["error_type"] is DomainCheckoutService.TransferFailed
        assert errors["fqdn"] == "locked.com"
        assert "domain" not in repository.find_by_id(service.id).data

    def test_delegated_failure_is_not_swallowed(self, unit_env):
        """A failing delegated service should fail the checkout with a cause."""
        factory, registrar, _, account_id, service = self._setup(unit_env)
        registrar.unavailable.add("taken.com")
        item = make_cart_item(service.id, domain="taken.com")

        checkout = factory.domain_checkout(
            {"shopping_cart_item": item, "contact": CONTACT}, account_id
        )
        with pytest.raises(DomainCheckoutService.DelegationFailed) as exc_info:
            checkout.run()

        cause = exc_info.value.errors["cause"]
        assert cause["error"] == "Domain registration failed for taken.com"
        assert exc_info.value.errors["fqdn"] == "taken.com"
        assert checkout.failure()

    def test_checkout_without_contract_values_fails_validation(self, unit_env):
        """Skipping the contract should fail the checkout instead of crashing."""
        _, registrar, repository, account_id, _ = self._setup(unit_env)
        checkout = DomainCheckoutService(
            {"contact": CONTACT},
            registrar=registrar,
            service_repository=repository,
            account_id=account_id,
            validator=NoContractValidator(),
        )

        with pytest.raises(ValidationFailed, match="Shopping cart item"):
            checkout.run()

        assert registrar.created == []

    def test_empty_params_fail_validation(self, unit_env):
        """Missing params should be reported by field."""
        factory, _, _, account_id, _ = self._setup(unit_env)

        with pytest.raises(ValidationFailed) as exc_info:
            factory.domain_checkout({}, account_id).run()

        fields = {d["field"] for d in exc_info.value.errors["details"]}
        assert fields == {"shopping_cart_item", "contact"}
