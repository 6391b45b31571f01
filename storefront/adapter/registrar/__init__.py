"""Registrar adapter."""

from .client import HttpRegistrar, MockRegistrar, RegistrarRequestError

__all__ = ["HttpRegistrar", "MockRegistrar", "RegistrarRequestError"]
