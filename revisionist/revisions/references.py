"""Foreign key reference resolution.

Turns a stored foreign key value into a label for the entity it pointed at.
Null keys, deleted rows and unknown ids are all displayable states; only a
field with no matching relation is reported, as a RelationNotFound result
rather than an exception, so the caller can fall back to the raw value.
"""

from dataclasses import dataclass
from typing import Any

from revisionist.entities.models import read_attribute
from revisionist.entities.store import EntityStore
from revisionist.formatting.registry import ValueFormatter
from revisionist.observability.metrics import record_reference_outcome
from revisionist.revisions.naming import relation_name_candidates
from revisionist.schema.models import ReferenceContext
from revisionist.schema.provider import SchemaProvider


@dataclass(frozen=True)
class ResolvedReference:
    """Display label for a foreign key value."""

    label: str
    relation: str
    target_type: str
    was_null: bool = False
    was_missing: bool = False
    entity: Any = None


@dataclass(frozen=True)
class RelationNotFound:
    """The owning type declares no relation for a foreign key field."""

    entity_type: str
    field: str
    tried: tuple[str, ...] = ()

    @property
    def message(self) -> str:
        return (
            f"Relation {' or '.join(self.tried)} does not exist "
            f"for {self.entity_type}"
        )


ReferenceResult = ResolvedReference | RelationNotFound


def _is_null(raw_id: Any) -> bool:
    return raw_id is None or raw_id == ""


class ReferenceResolver:
    """Resolves relation fields to a label for the related entity."""

    def __init__(
        self,
        schemas: SchemaProvider,
        store: EntityStore,
        formatter: ValueFormatter,
    ) -> None:
        self._schemas = schemas
        self._store = store
        self._formatter = formatter

    def find_relation(self, entity_type: str, field: str) -> tuple[str, str] | RelationNotFound:
        """Relation name and target type for a foreign key field.

        Tries the field stem first, then its camel-case form.
        """
        candidates = relation_name_candidates(field)
        for relation in candidates:
            target = self._schemas.get_relation_target(entity_type, relation)
            if target is not None:
                return relation, target
        return RelationNotFound(entity_type=entity_type, field=field, tried=tuple(candidates))

    def resolve(self, entity_type: str, field: str, raw_id: Any) -> ReferenceResult:
        """Resolve one stored foreign key value.

        Store errors propagate; the value pipeline decides whether to swallow them.
        """
        found = self.find_relation(entity_type, field)
        if isinstance(found, RelationNotFound):
            record_reference_outcome("relation_not_found")
            return found
        relation, target_type = found

        if _is_null(raw_id):
            record_reference_outcome("null")
            return ResolvedReference(
                label=self._schemas.get_null_display_string(target_type),
                relation=relation,
                target_type=target_type,
                was_null=True,
            )

        entity = self._store.find_by_id(
            target_type,
            raw_id,
            include_soft_deleted=self._include_soft_deleted(target_type),
        )
        if entity is None:
            record_reference_outcome("missing")
            unknown = self._schemas.get_unknown_reference_display_string(target_type)
            return ResolvedReference(
                label=self._formatter.format(entity_type, field, unknown),
                relation=relation,
                target_type=target_type,
                was_missing=True,
            )

        record_reference_outcome("resolved")
        return ResolvedReference(
            label=self._label_for(entity_type, field, target_type, entity),
            relation=relation,
            target_type=target_type,
            entity=entity,
        )

    def _include_soft_deleted(self, target_type: str) -> bool:
        # Unregistered targets may still be soft deleted by the store
        if self._schemas.get_schema(target_type) is None:
            return True
        return self._schemas.supports_soft_delete(target_type)

    def _label_for(self, entity_type: str, field: str, target_type: str, entity: Any) -> str:
        target_schema = self._schemas.get_schema(target_type)
        if target_schema is None:
            name = str(read_attribute(entity, "id"))
            return self._formatter.format(entity_type, field, name)

        name = target_schema.name_of(entity)
        accessor = target_schema.reference_accessor(field)
        if accessor is not None:
            raw = accessor(ReferenceContext(entity=entity, field=field, identifying_name=name))
            return self._formatter.format(entity_type, field, raw)
        return self._formatter.format(entity_type, field, name)
