"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class RegistrarError(DomainError):
    """The registrar could not complete a request."""

    pass
