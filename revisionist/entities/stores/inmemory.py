"""In-memory implementation of EntityStore."""

from datetime import UTC, datetime
from typing import Any

from revisionist.entities.models import StoredEntity
from revisionist.entities.store import EntityStore


def _key(entity_id: Any) -> str:
    # Revision values are stored as strings, so 42 and "42" address the same row
    return str(entity_id)


class InMemoryEntityStore(EntityStore):
    """In-memory implementation of EntityStore for testing and development."""

    def __init__(self) -> None:
        self._entities: dict[str, dict[str, StoredEntity]] = {}

    def add(
        self,
        entity_type: str,
        entity_id: Any,
        deleted_at: datetime | None = None,
        **attributes: Any,
    ) -> StoredEntity:
        """Add or replace an entity."""
        entity = StoredEntity(id=entity_id, attributes=attributes, deleted_at=deleted_at)
        self._entities.setdefault(entity_type, {})[_key(entity_id)] = entity
        return entity

    def soft_delete(self, entity_type: str, entity_id: Any) -> bool:
        """Mark an entity deleted while keeping it retrievable."""
        entity = self._entities.get(entity_type, {}).get(_key(entity_id))
        if entity is None:
            return False
        self._entities[entity_type][_key(entity_id)] = entity.model_copy(
            update={"deleted_at": datetime.now(UTC)}
        )
        return True

    def delete(self, entity_type: str, entity_id: Any) -> bool:
        """Remove an entity permanently."""
        return self._entities.get(entity_type, {}).pop(_key(entity_id), None) is not None

    def find_by_id(
        self,
        entity_type: str,
        entity_id: Any,
        *,
        include_soft_deleted: bool = False,
    ) -> StoredEntity | None:
        entity = self._entities.get(entity_type, {}).get(_key(entity_id))
        if entity is None:
            return None
        if entity.is_deleted and not include_soft_deleted:
            return None
        return entity
