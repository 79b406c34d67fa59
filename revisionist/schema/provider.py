"""SchemaProvider abstract interface."""

from abc import ABC, abstractmethod

from revisionist.formatting.rules import FormatRule
from revisionist.schema.models import EntitySchema


class SchemaProvider(ABC):
    """Read-only access to entity schemas and relation metadata.

    Unregistered entity types yield empty maps and the configured default
    display strings, never errors.
    """

    @abstractmethod
    def get_schema(self, entity_type: str) -> EntitySchema | None:
        """Get the schema for an entity type."""
        pass

    @abstractmethod
    def get_field_label_overrides(self, entity_type: str) -> dict[str, str]:
        """Get field label overrides for an entity type."""
        pass

    @abstractmethod
    def get_formatter_rules(self, entity_type: str) -> dict[str, FormatRule]:
        """Get format rules keyed by field for an entity type."""
        pass

    @abstractmethod
    def get_null_display_string(self, entity_type: str) -> str:
        """String shown for a null reference to an entity type."""
        pass

    @abstractmethod
    def get_unknown_reference_display_string(self, entity_type: str) -> str:
        """String shown for a reference to a missing entity."""
        pass

    @abstractmethod
    def get_relation_target(self, entity_type: str, relation_name: str) -> str | None:
        """Target entity type of a relation, or None if the relation is unknown."""
        pass

    @abstractmethod
    def supports_soft_delete(self, entity_type: str) -> bool:
        """Whether rows of an entity type are soft deleted."""
        pass
