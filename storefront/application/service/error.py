"""Service object exit signals and failure kinds.

``ServiceExit`` stops a service without error. ``ServiceError`` and its
subclasses stop it and, once ``fail`` has recorded an errors payload, make
``run`` propagate the failure to the caller.
"""

from typing import Any


class ServiceExit(Exception):
    """Exit early without error."""

    pass


class ServiceError(ServiceExit):
    """Exit early and propagate a failure.

    Subclass this to give callers a kind they can catch on its own.

    Attributes:
        message: Human readable failure message
        errors: Errors payload (``error``, ``error_type`` and any context)
    """

    def __init__(self, message: str = "", errors: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.errors: dict[str, Any] = dict(errors or {})


class ValidationFailed(ServiceError):
    """Params did not satisfy the service contract."""

    pass


class ExecuteNotImplemented(ServiceError, NotImplementedError):
    """A service reached the base ``execute`` implementation."""

    pass


class ServiceReuseError(RuntimeError):
    """Raised when ``run`` is called more than once on the same instance."""

    def __init__(self, service: str):
        super().__init__(f"{service} has already been run")
