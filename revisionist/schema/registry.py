"""In-process schema registry populated at startup."""

from collections.abc import Mapping

from revisionist.config.models.display import DisplayConfig
from revisionist.errors import DuplicateSchemaError, SchemaNotRegisteredError
from revisionist.formatting.rules import FormatRule
from revisionist.schema.models import EntityDefinition, EntitySchema
from revisionist.schema.provider import SchemaProvider


class SchemaRegistry(SchemaProvider):
    """Explicit map from entity type identifier to EntitySchema.

    Populate it once at startup with register() or load(); afterwards it is
    only read, so it can be shared across concurrent resolutions.
    """

    def __init__(self, display: DisplayConfig | None = None) -> None:
        self._display = display or DisplayConfig()
        self._schemas: dict[str, EntitySchema] = {}

    def register(self, schema: EntitySchema, *, replace: bool = False) -> EntitySchema:
        """Register a schema under its entity type.

        Raises:
            DuplicateSchemaError: If the type is already registered and replace is False
        """
        if schema.entity_type in self._schemas and not replace:
            raise DuplicateSchemaError(schema.entity_type)
        self._schemas[schema.entity_type] = schema
        return schema

    def load(self, definitions: Mapping[str, EntityDefinition]) -> None:
        """Register hook-less schemas for declarative definitions."""
        for entity_type, definition in definitions.items():
            self.register(EntitySchema.from_definition(entity_type, definition))

    def require(self, entity_type: str) -> EntitySchema:
        """Get a schema the caller cannot proceed without.

        Raises:
            SchemaNotRegisteredError: If the type is not registered
        """
        schema = self._schemas.get(entity_type)
        if schema is None:
            raise SchemaNotRegisteredError(entity_type)
        return schema

    def __contains__(self, entity_type: object) -> bool:
        return entity_type in self._schemas

    @property
    def entity_types(self) -> list[str]:
        return sorted(self._schemas)

    def get_schema(self, entity_type: str) -> EntitySchema | None:
        return self._schemas.get(entity_type)

    def get_field_label_overrides(self, entity_type: str) -> dict[str, str]:
        schema = self._schemas.get(entity_type)
        return dict(schema.field_labels) if schema else {}

    def get_formatter_rules(self, entity_type: str) -> dict[str, FormatRule]:
        schema = self._schemas.get(entity_type)
        return dict(schema.format_rules) if schema else {}

    def get_null_display_string(self, entity_type: str) -> str:
        schema = self._schemas.get(entity_type)
        if schema and schema.null_display is not None:
            return schema.null_display
        return self._display.null_display

    def get_unknown_reference_display_string(self, entity_type: str) -> str:
        schema = self._schemas.get(entity_type)
        if schema and schema.unknown_display is not None:
            return schema.unknown_display
        return self._display.unknown_display

    def get_relation_target(self, entity_type: str, relation_name: str) -> str | None:
        schema = self._schemas.get(entity_type)
        if schema is None:
            return None
        return schema.relations.get(relation_name)

    def supports_soft_delete(self, entity_type: str) -> bool:
        schema = self._schemas.get(entity_type)
        return bool(schema and schema.soft_deletes)
