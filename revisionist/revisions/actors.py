"""Actor lookup strategies for "who made this change".

The integrator picks exactly one strategy when wiring the presenter.
"""

from abc import ABC, abstractmethod
from typing import Any

from revisionist.entities.store import EntityStore


class ActorLookup(ABC):
    """Resolves a revision's user id to a user entity."""

    @abstractmethod
    def find_user_by_id(self, user_id: Any) -> Any | None:
        """Find a user by id."""
        pass


class EntityStoreActorLookup(ActorLookup):
    """Loads users from the entity store under a configured entity type."""

    def __init__(self, store: EntityStore, user_entity_type: str) -> None:
        self._store = store
        self._user_entity_type = user_entity_type

    @property
    def user_entity_type(self) -> str:
        return self._user_entity_type

    def find_user_by_id(self, user_id: Any) -> Any | None:
        return self._store.find_by_id(self._user_entity_type, user_id)


class NullActorLookup(ActorLookup):
    """Used when the application has no user model."""

    def find_user_by_id(self, user_id: Any) -> Any | None:  # noqa: ARG002
        return None
