"""Test harness for unit tests.

Builds a dishka container with mock components unless unmocked.
Settings are loaded from environment variables (configure via .env or export).
"""

import pytest

from storefront.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Closes the container afterwards

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields a request-scoped Container

    Usage:
        unit_env = create_env_fixture()

        def test_checkout(unit_env):
            factory = unit_env.get(ServiceFactory)
            service = factory.domain_checkout(params, account_id)
            assert service.run() is not None
    """

    @pytest.fixture
    def _test_environment():
        container = build_test_container(unmock=unmock or set())

        with container() as request_container:
            yield request_container

        container.close()

    return _test_environment
