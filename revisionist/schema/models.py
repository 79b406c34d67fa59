"""Entity schema models.

An EntityDefinition is the declarative part of a schema and can be loaded
from TOML. An EntitySchema adds the code-registered capability hooks used
only for rendering: the identifying-name function, display accessors on the
owning type, and reference accessors on a related type.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from revisionist.entities.models import read_attribute
from revisionist.formatting.rules import FormatRule, coerce_rule


@dataclass(frozen=True)
class ReferenceContext:
    """What a reference accessor receives when rendering a related entity."""

    entity: Any
    field: str
    identifying_name: str


DisplayAccessor = Callable[[Any], Any]
ReferenceAccessor = Callable[[ReferenceContext], Any]
IdentifyingName = Callable[[Any], str]


class EntityDefinition(BaseModel):
    """Declarative revision display settings for one entity type."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    relations: dict[str, str] = Field(
        default_factory=dict,
        description="Relation name to target entity type",
    )
    field_labels: dict[str, str] = Field(
        default_factory=dict,
        description="Field identifier to display label overrides",
    )
    format_rules: dict[str, FormatRule] = Field(
        default_factory=dict,
        description="Field identifier to format rule",
    )
    null_display: str | None = Field(
        default=None,
        description="Shown for a null reference to this type",
    )
    unknown_display: str | None = Field(
        default=None,
        description="Shown for a missing reference to this type",
    )
    soft_deletes: bool = Field(
        default=False,
        description="Whether rows of this type are soft deleted",
    )
    name_attribute: str | None = Field(
        default=None,
        description="Attribute holding the identifying name (defaults to the id)",
    )

    @field_validator("format_rules", mode="before")
    @classmethod
    def parse_compact_rules(cls, value: Any) -> Any:
        """Accept 'kind:argument' strings as rule values."""
        if isinstance(value, dict):
            return {field: coerce_rule(rule) for field, rule in value.items()}
        return value


class EntitySchema(EntityDefinition):
    """Complete schema for one entity type, including rendering hooks."""

    entity_type: str = Field(..., min_length=1, description="Entity type identifier")
    identifying_name: IdentifyingName | None = Field(
        default=None,
        exclude=True,
        description="Short human label for an instance",
    )
    display_accessors: dict[str, DisplayAccessor] = Field(
        default_factory=dict,
        exclude=True,
        description="Display-only accessors applied to raw values of this type's fields",
    )
    reference_accessors: dict[str, ReferenceAccessor] = Field(
        default_factory=dict,
        exclude=True,
        description="Accessors used when this type is the target of a reference field",
    )

    @classmethod
    def from_definition(
        cls,
        entity_type: str,
        definition: EntityDefinition,
        **hooks: Any,
    ) -> "EntitySchema":
        """Build a schema from a declarative definition plus optional hooks."""
        return cls(entity_type=entity_type, **definition.model_dump(), **hooks)

    def display_accessor(self, field: str) -> DisplayAccessor | None:
        return self.display_accessors.get(field)

    def reference_accessor(self, field: str) -> ReferenceAccessor | None:
        return self.reference_accessors.get(field)

    def name_of(self, entity: Any) -> str:
        """Identifying name of an instance of this type."""
        if self.identifying_name is not None:
            return str(self.identifying_name(entity))
        if self.name_attribute:
            name = read_attribute(entity, self.name_attribute)
            if name is not None:
                return str(name)
        return str(read_attribute(entity, "id"))
