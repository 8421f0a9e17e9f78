"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for domain entities.

    Entities are frozen; changes go through ``model_copy(update=...)`` so a
    repository only ever sees complete, validated snapshots.
    """

    model_config = ConfigDict(frozen=True)
