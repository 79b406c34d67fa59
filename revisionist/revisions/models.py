"""Revision record and view models."""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

StoredValue = str | int | float | bool | None


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


class ValueSide(str, Enum):
    """Which stored value of a revision to resolve."""

    OLD = "old"
    NEW = "new"


class RevisionRecord(BaseModel):
    """One changed field on one entity change event.

    Created by the capture subsystem; read-only here.
    """

    model_config = ConfigDict(frozen=True)

    id: Any = Field(default=None, description="Record identifier, if persisted")
    entity_type: str = Field(..., description="Owning entity type")
    entity_id: Any = Field(..., description="Owning entity instance id")
    field: str = Field(..., min_length=1, description="Raw field identifier")
    old_value: StoredValue = Field(default=None, description="Value before the change")
    new_value: StoredValue = Field(default=None, description="Value after the change")
    user_id: Any = Field(default=None, description="Actor responsible")
    created_at: datetime = Field(default_factory=utc_now, description="Change time")

    def value(self, which: ValueSide | str) -> StoredValue:
        """Raw stored value for one side of the change."""
        side = ValueSide(which)
        return self.old_value if side is ValueSide.OLD else self.new_value


class RevisionView(BaseModel):
    """A revision with every part resolved for display."""

    model_config = ConfigDict(frozen=True)

    entity_type: str
    entity_id: Any
    field: str
    field_label: str
    old_value: str
    new_value: str
    user_id: Any = None
    created_at: datetime
