"""Tests for SqlAlchemyEntityStore against in-memory SQLite."""

from datetime import datetime

import pytest
from sqlalchemy import (
    Column,
    DateTime,
    Integer,
    MetaData,
    String,
    Table,
    create_engine,
    insert,
)
from sqlalchemy.exc import OperationalError

from revisionist.config.models.storage import StorageConfig
from revisionist.entities.stores.sqlalchemy import (
    SqlAlchemyEntityStore,
    TableMapping,
    create_engine_from_config,
)
from revisionist.errors import EntityStoreError

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(100)),
    Column("deleted_at", DateTime, nullable=True),
)

statuses = Table(
    "statuses",
    metadata,
    Column("code", String(20), primary_key=True),
    Column("label", String(100)),
)


@pytest.fixture
def engine():
    engine = create_engine("sqlite://")
    metadata.create_all(engine)
    with engine.begin() as conn:
        conn.execute(
            insert(users),
            [
                {"id": 42, "name": "Jane Doe", "deleted_at": None},
                {"id": 7, "name": "Sam Roe", "deleted_at": datetime(2024, 3, 1)},
            ],
        )
        conn.execute(insert(statuses), [{"code": "pub", "label": "Published"}])
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine) -> SqlAlchemyEntityStore:
    return SqlAlchemyEntityStore(
        engine,
        {
            "users": TableMapping(users, deleted_at_column="deleted_at"),
            "statuses": TableMapping(statuses, id_column="code"),
        },
    )


class TestFindById:
    """Tests for lookups."""

    def test_finds_row_by_string_id(self, store: SqlAlchemyEntityStore) -> None:
        entity = store.find_by_id("users", "42")
        assert entity is not None
        assert entity.id == 42
        assert entity.get("name") == "Jane Doe"
        assert entity.deleted_at is None

    def test_soft_deleted_hidden_by_default(self, store: SqlAlchemyEntityStore) -> None:
        assert store.find_by_id("users", 7) is None

    def test_soft_deleted_included_on_request(self, store: SqlAlchemyEntityStore) -> None:
        entity = store.find_by_id("users", 7, include_soft_deleted=True)
        assert entity is not None
        assert entity.get("name") == "Sam Roe"
        assert entity.is_deleted is True

    def test_missing_row(self, store: SqlAlchemyEntityStore) -> None:
        assert store.find_by_id("users", 999, include_soft_deleted=True) is None

    def test_non_numeric_id_matches_nothing(self, store: SqlAlchemyEntityStore) -> None:
        assert store.find_by_id("users", "abc") is None

    def test_custom_id_column(self, store: SqlAlchemyEntityStore) -> None:
        entity = store.find_by_id("statuses", "pub")
        assert entity is not None
        assert entity.id == "pub"
        assert entity.get("label") == "Published"

    def test_unmapped_type(self, store: SqlAlchemyEntityStore) -> None:
        assert store.find_by_id("ghosts", 1) is None


class TestErrors:
    """Tests for backend error wrapping."""

    def test_backend_error_is_wrapped(self) -> None:
        engine = create_engine("sqlite://")
        store = SqlAlchemyEntityStore(engine, {"users": TableMapping(users)})

        with pytest.raises(EntityStoreError) as exc_info:
            store.find_by_id("users", 1)
        assert isinstance(exc_info.value.cause, OperationalError)


class TestCreateEngineFromConfig:
    """Tests for engine construction."""

    def test_requires_connection_url(self) -> None:
        with pytest.raises(ValueError):
            create_engine_from_config(StorageConfig(backend="sqlalchemy"))

    def test_sqlite_url(self) -> None:
        engine = create_engine_from_config(
            StorageConfig(backend="sqlalchemy", connection_url="sqlite://")
        )
        assert engine.dialect.name == "sqlite"
        engine.dispose()
