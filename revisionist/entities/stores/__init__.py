"""Entity store implementations."""

from revisionist.entities.stores.inmemory import InMemoryEntityStore
from revisionist.entities.stores.sqlalchemy import (
    SqlAlchemyEntityStore,
    TableMapping,
    create_engine_from_config,
)

__all__ = [
    "InMemoryEntityStore",
    "SqlAlchemyEntityStore",
    "TableMapping",
    "create_engine_from_config",
]
