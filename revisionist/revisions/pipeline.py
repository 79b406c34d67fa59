"""Value resolution pipeline.

Decides how one stored old/new value is displayed:

1. Unregistered owning type: the raw value, formatted.
2. Foreign key field: the referenced entity's label (see ReferenceResolver).
   A missing relation or any collaborator failure falls through to 3/4.
3. A display accessor on the owning type, applied to the raw value.
4. The raw value through the field's format rule.

Configuration errors are the only failures that escape.
"""

from typing import Any

from revisionist.entities.store import EntityStore
from revisionist.errors import RevisionistConfigurationError
from revisionist.formatting.registry import ValueFormatter
from revisionist.observability.logging import get_logger
from revisionist.observability.metrics import record_reference_outcome, record_value_fallback
from revisionist.revisions.models import RevisionRecord, ValueSide
from revisionist.revisions.naming import is_foreign_key
from revisionist.revisions.references import ReferenceResolver, RelationNotFound
from revisionist.schema.provider import SchemaProvider

logger = get_logger(__name__)


class ValueResolver:
    """Renders the old or new value of a revision as a display string."""

    def __init__(
        self,
        schemas: SchemaProvider,
        store: EntityStore,
        formatter: ValueFormatter | None = None,
        references: ReferenceResolver | None = None,
    ) -> None:
        self._schemas = schemas
        self._formatter = formatter or ValueFormatter(schemas)
        self._references = references or ReferenceResolver(schemas, store, self._formatter)

    @property
    def formatter(self) -> ValueFormatter:
        return self._formatter

    def resolve(self, record: RevisionRecord, which: ValueSide | str) -> str:
        """Display string for one side of a revision."""
        raw = record.value(which)
        schema = self._schemas.get_schema(record.entity_type)
        if schema is None:
            return self._formatter.format(record.entity_type, record.field, raw)

        if is_foreign_key(record.field):
            label = self._resolve_reference(record, raw)
            if label is not None:
                return label

        accessor = schema.display_accessor(record.field)
        if accessor is not None:
            return self._formatter.format(record.entity_type, record.field, accessor(raw))

        return self._formatter.format(record.entity_type, record.field, raw)

    def old_value(self, record: RevisionRecord) -> str:
        return self.resolve(record, ValueSide.OLD)

    def new_value(self, record: RevisionRecord) -> str:
        return self.resolve(record, ValueSide.NEW)

    def _resolve_reference(self, record: RevisionRecord, raw: Any) -> str | None:
        """Reference label, or None to fall back to the raw value."""
        try:
            result = self._references.resolve(record.entity_type, record.field, raw)
        except RevisionistConfigurationError:
            raise
        except Exception as e:
            record_reference_outcome("failed")
            record_value_fallback("reference_error")
            logger.warning(
                "reference_resolution_failed",
                entity_type=record.entity_type,
                entity_id=str(record.entity_id),
                field=record.field,
                error=str(e),
                exc_info=True,
            )
            return None

        if isinstance(result, RelationNotFound):
            record_value_fallback("relation_not_found")
            logger.info(
                "relation_not_found",
                entity_type=record.entity_type,
                field=record.field,
                tried=list(result.tried),
            )
            return None

        return result.label
