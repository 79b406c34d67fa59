"""SQLAlchemy Core implementation of EntityStore.

Entity types are mapped explicitly to tables at construction time; no table
or model is discovered by name at lookup time.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from sqlalchemy import Engine, Table, create_engine, select
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError

from revisionist.config.models.storage import StorageConfig
from revisionist.entities.models import StoredEntity
from revisionist.entities.store import EntityStore
from revisionist.errors import EntityStoreError
from revisionist.observability.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TableMapping:
    """How one entity type is stored.

    deleted_at_column names the soft delete timestamp column; None means rows
    of this type are hard deleted.
    """

    table: Table
    id_column: str = "id"
    deleted_at_column: str | None = None


def create_engine_from_config(config: StorageConfig) -> Engine:
    """Create an engine for the configured connection URL.

    Raises:
        ValueError: If no connection URL is configured
    """
    if not config.connection_url:
        raise ValueError("storage.connection_url is required for the sqlalchemy backend")

    url = make_url(config.connection_url)
    options: dict[str, Any] = {"echo": config.echo}
    if url.get_backend_name() != "sqlite":
        options.update(pool_size=config.pool_size, pool_timeout=config.pool_timeout)
    return create_engine(url, **options)


class SqlAlchemyEntityStore(EntityStore):
    """Fetches entities with SQLAlchemy Core selects.

    Each lookup checks out a connection from the engine pool for the
    duration of a single select.
    """

    def __init__(self, engine: Engine, mappings: Mapping[str, TableMapping]) -> None:
        self._engine = engine
        self._mappings = dict(mappings)

    @classmethod
    def from_config(
        cls,
        config: StorageConfig,
        mappings: Mapping[str, TableMapping],
    ) -> "SqlAlchemyEntityStore":
        return cls(create_engine_from_config(config), mappings)

    def find_by_id(
        self,
        entity_type: str,
        entity_id: Any,
        *,
        include_soft_deleted: bool = False,
    ) -> StoredEntity | None:
        mapping = self._mappings.get(entity_type)
        if mapping is None:
            logger.debug("entity_type_not_mapped", entity_type=entity_type)
            return None

        id_column = mapping.table.c[mapping.id_column]
        key = self._coerce_id(id_column, entity_id)
        if key is None:
            return None

        statement = select(mapping.table).where(id_column == key)
        if mapping.deleted_at_column and not include_soft_deleted:
            statement = statement.where(mapping.table.c[mapping.deleted_at_column].is_(None))

        try:
            with self._engine.connect() as conn:
                row = conn.execute(statement).mappings().first()
        except SQLAlchemyError as e:
            logger.error(
                "entity_lookup_error",
                entity_type=entity_type,
                entity_id=str(entity_id),
                error=str(e),
            )
            raise EntityStoreError(f"Failed to load {entity_type} {entity_id}: {e}", cause=e) from e

        if row is None:
            return None
        return self._row_to_entity(mapping, row)

    @staticmethod
    def _coerce_id(column: Any, entity_id: Any) -> Any:
        """Convert a stored revision value to the id column's Python type."""
        try:
            python_type = column.type.python_type
        except NotImplementedError:
            return entity_id
        if isinstance(entity_id, python_type):
            return entity_id
        try:
            return python_type(entity_id)
        except (TypeError, ValueError):
            # A value that cannot be an id cannot match a row
            return None

    @staticmethod
    def _row_to_entity(mapping: TableMapping, row: Mapping[str, Any]) -> StoredEntity:
        attributes = dict(row)
        entity_id = attributes.pop(mapping.id_column)
        deleted_at = None
        if mapping.deleted_at_column:
            deleted_at = attributes.pop(mapping.deleted_at_column, None)
        return StoredEntity(id=entity_id, attributes=attributes, deleted_at=deleted_at)
