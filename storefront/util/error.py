"""Utility layer errors raised while wiring the application together."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Settings are missing or inconsistent."""

    pass


class DependencyInjectionError(UtilError):
    """A provider could not be resolved for a component."""

    pass
