"""Test container builder with selective unmocking."""

from dishka import Container, make_container

from storefront.util.di import PROVIDERS, Component, get_provider, is_mockable


def mockable_components() -> set[str]:
    """Names of every component that has a mock implementation."""
    return {base.__mock_component__ for base in PROVIDERS if is_mockable(base)}


def build_test_container(unmock: set[Component] | None = None) -> Container:
    """Build test container, mocking every component not listed in ``unmock``.

    Args:
        unmock: Components to use production implementations for

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Real registrar client (reads REGISTRAR__* settings)
        container = build_test_container(unmock={"registrar"})
    """
    unmock = unmock or set()

    unknown = unmock - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        get_provider(
            base,
            use_mock=is_mockable(base) and base.__mock_component__ not in unmock,
        )()
        for base in PROVIDERS
    ]
    return make_container(*providers)
