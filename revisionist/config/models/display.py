"""Display, history and actor configuration models."""

from pydantic import BaseModel, Field


class DisplayConfig(BaseModel):
    """Fallback strings used when an entity schema does not define its own."""

    null_display: str = Field(
        default="nothing",
        description="Shown when a foreign key value is null or empty",
    )
    unknown_display: str = Field(
        default="unknown",
        description="Shown when a referenced entity cannot be found",
    )


class HistoryConfig(BaseModel):
    """Lookup behavior for the entity a revision belongs to."""

    include_soft_deleted_owner: bool = Field(
        default=False,
        description="Return soft-deleted owners from history_of",
    )


class ActorsConfig(BaseModel):
    """Actor (user responsible) lookup configuration."""

    user_entity_type: str | None = Field(
        default="users",
        description="Entity type holding users; None disables actor lookup",
    )
