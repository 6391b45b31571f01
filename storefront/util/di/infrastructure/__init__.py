"""Infrastructure providers."""

# Import bases
from .persistence import PersistenceProvider
from .registrar import RegistrarProvider

# Import implementations (needed for __subclasses__())
from .registrar import ProdRegistrarProvider  # noqa: F401

__all__ = [
    "PersistenceProvider",
    "ProdRegistrarProvider",
    "RegistrarProvider",
]
