"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ProviderError(AdapterError):
    """An external provider (registrar, ...) failed or misbehaved."""

    pass
