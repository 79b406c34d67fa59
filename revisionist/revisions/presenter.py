"""Revision presenter.

Bundles the resolvers behind one object exposing everything a history view
shows for a revision: field label, old and new values, the actor responsible
and the entity the revision belongs to.
"""

from typing import Any

from revisionist.config.models.display import HistoryConfig
from revisionist.entities.store import EntityStore
from revisionist.formatting.registry import FormatterRegistry, ValueFormatter
from revisionist.revisions.actors import ActorLookup, NullActorLookup
from revisionist.revisions.labels import FieldNameResolver
from revisionist.revisions.models import RevisionRecord, RevisionView
from revisionist.revisions.pipeline import ValueResolver
from revisionist.schema.provider import SchemaProvider


class RevisionPresenter:
    """Resolves revision records for display."""

    def __init__(
        self,
        schemas: SchemaProvider,
        store: EntityStore,
        actors: ActorLookup | None = None,
        formatters: FormatterRegistry | None = None,
        history: HistoryConfig | None = None,
    ) -> None:
        self._schemas = schemas
        self._store = store
        self._actors = actors or NullActorLookup()
        self._history = history or HistoryConfig()
        self._labels = FieldNameResolver(schemas)
        self._values = ValueResolver(
            schemas,
            store,
            formatter=ValueFormatter(schemas, formatters),
        )

    def field_name(self, record: RevisionRecord) -> str:
        return self._labels.resolve(record.entity_type, record.field)

    def old_value(self, record: RevisionRecord) -> str:
        return self._values.old_value(record)

    def new_value(self, record: RevisionRecord) -> str:
        return self._values.new_value(record)

    def format(self, entity_type: str, field: str, value: Any) -> str:
        """Apply the format rule for (entity_type, field) to an arbitrary value."""
        return self._values.formatter.format(entity_type, field, value)

    def user_responsible(self, record: RevisionRecord) -> Any | None:
        """The user who made the change, or None when unknown."""
        if record.user_id is None or record.user_id == "":
            return None
        return self._actors.find_user_by_id(record.user_id)

    def history_of(self, record: RevisionRecord) -> Any | None:
        """The entity this revision belongs to.

        Returns None for unregistered entity types. Store errors propagate.
        """
        if self._schemas.get_schema(record.entity_type) is None:
            return None
        return self._store.find_by_id(
            record.entity_type,
            record.entity_id,
            include_soft_deleted=self._history.include_soft_deleted_owner,
        )

    def present(self, record: RevisionRecord) -> RevisionView:
        """Resolve every displayable part of a revision."""
        return RevisionView(
            entity_type=record.entity_type,
            entity_id=record.entity_id,
            field=record.field,
            field_label=self.field_name(record),
            old_value=self.old_value(record),
            new_value=self.new_value(record),
            user_id=record.user_id,
            created_at=record.created_at,
        )

    def present_all(self, records: list[RevisionRecord]) -> list[RevisionView]:
        return [self.present(record) for record in records]
