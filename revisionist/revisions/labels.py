"""Field label resolution."""

from revisionist.revisions.naming import strip_foreign_key_suffix
from revisionist.schema.provider import SchemaProvider


class FieldNameResolver:
    """Maps a raw field identifier to the label shown next to its values."""

    def __init__(self, schemas: SchemaProvider) -> None:
        self._schemas = schemas

    def resolve(self, entity_type: str, field: str) -> str:
        """Label override if configured, else the field minus any '_id' suffix."""
        override = self._schemas.get_field_label_overrides(entity_type).get(field)
        if override is not None:
            return override
        return strip_foreign_key_suffix(field)
