"""Shared base for entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for pages, comments and users.

    Instances are frozen; changes go through ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True)
