"""Entity representation returned by the entity stores."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class StoredEntity(BaseModel):
    """A row fetched from an entity store.

    Stores return this shape regardless of backend so that identifying-name
    and accessor hooks can read attributes uniformly.
    """

    model_config = ConfigDict(frozen=True)

    id: Any = Field(..., description="Primary key as stored")
    attributes: dict[str, Any] = Field(default_factory=dict, description="Column values")
    deleted_at: datetime | None = Field(default=None, description="Soft delete time")

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def get(self, key: str, default: Any = None) -> Any:
        if key == "id":
            return self.id
        return self.attributes.get(key, default)


def read_attribute(entity: Any, key: str, default: Any = None) -> Any:
    """Read an attribute from a StoredEntity, a mapping, or a plain object."""
    if isinstance(entity, StoredEntity):
        return entity.get(key, default)
    if isinstance(entity, Mapping):
        return entity.get(key, default)
    return getattr(entity, key, default)
