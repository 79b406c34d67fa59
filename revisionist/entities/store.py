"""EntityStore abstract interface."""

from abc import ABC, abstractmethod
from typing import Any


class EntityStore(ABC):
    """Read path to domain entities referenced by revisions.

    Lookups are blocking. Backend failures are raised as EntityStoreError.
    """

    @abstractmethod
    def find_by_id(
        self,
        entity_type: str,
        entity_id: Any,
        *,
        include_soft_deleted: bool = False,
    ) -> Any | None:
        """Find an entity by id, optionally including soft-deleted rows."""
        pass
