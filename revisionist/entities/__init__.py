"""Entity read path: the store interface and its implementations."""

from revisionist.entities.models import StoredEntity, read_attribute
from revisionist.entities.store import EntityStore

__all__ = ["EntityStore", "StoredEntity", "read_attribute"]
