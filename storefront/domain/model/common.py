"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable pydantic model shared by all storefront entities.

    Updates go through ``model_copy(update=...)`` and a repository ``save``.
    """

    model_config = ConfigDict(frozen=True)
