"""Mock providers for testing."""

from .registrar import MockRegistrarProvider
from .container import build_test_container

__all__ = [
    "MockRegistrarProvider",
    "build_test_container",
]
