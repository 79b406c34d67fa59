"""Bootstrap module wiring the revision presenter from configuration.

Handles:
- Configuring structured logging, with the app name bound to every event
- Populating the schema registry from declarative entity definitions
- Creating the entity store (in-memory or SQLAlchemy)
- Choosing the actor lookup strategy

Example usage:

    from revisionist.bootstrap import bootstrap

    presenter, ctx = bootstrap(table_mappings={"users": TableMapping(users_table)})
    ctx.registry.register(post_schema, replace=True)

    view = presenter.present(record)
"""

from collections.abc import Mapping
from dataclasses import dataclass

import structlog

from revisionist.config import get_settings
from revisionist.config.settings import Settings
from revisionist.entities.store import EntityStore
from revisionist.entities.stores.inmemory import InMemoryEntityStore
from revisionist.entities.stores.sqlalchemy import SqlAlchemyEntityStore, TableMapping
from revisionist.formatting.registry import FormatterRegistry
from revisionist.observability.logging import get_logger, setup_logging
from revisionist.revisions.actors import ActorLookup, EntityStoreActorLookup, NullActorLookup
from revisionist.revisions.presenter import RevisionPresenter
from revisionist.schema.registry import SchemaRegistry

logger = get_logger(__name__)


@dataclass
class BootstrapContext:
    """Collaborators created during bootstrap."""

    settings: Settings
    registry: SchemaRegistry
    store: EntityStore
    actors: ActorLookup
    formatters: FormatterRegistry


def build_registry(settings: Settings) -> SchemaRegistry:
    """Schema registry holding the configured entity definitions."""
    registry = SchemaRegistry(settings.display)
    registry.load(settings.entities)
    return registry


def build_store(
    settings: Settings,
    table_mappings: Mapping[str, TableMapping] | None = None,
) -> EntityStore:
    """Entity store for the configured backend."""
    if settings.storage.backend == "sqlalchemy":
        return SqlAlchemyEntityStore.from_config(settings.storage, table_mappings or {})
    return InMemoryEntityStore()


def build_actor_lookup(settings: Settings, store: EntityStore) -> ActorLookup:
    """Actor lookup strategy; disabled when no user entity type is configured."""
    if settings.actors.user_entity_type:
        return EntityStoreActorLookup(store, settings.actors.user_entity_type)
    return NullActorLookup()


def bootstrap(
    settings: Settings | None = None,
    table_mappings: Mapping[str, TableMapping] | None = None,
    formatters: FormatterRegistry | None = None,
    configure_logging: bool = True,
) -> tuple[RevisionPresenter, BootstrapContext]:
    """Create a fully wired RevisionPresenter.

    Args:
        settings: Settings to use (default: get_settings())
        table_mappings: Entity type to table mappings for the sqlalchemy backend
        formatters: Formatter registry with any custom kinds registered
        configure_logging: Whether to call setup_logging from settings and bind
            settings.app_name into the log context
    """
    settings = settings or get_settings()

    if configure_logging:
        log_config = settings.observability.logging
        setup_logging(
            level=log_config.level,
            format=log_config.format,
            redact_sensitive=log_config.redact_sensitive,
        )
        structlog.contextvars.bind_contextvars(app=settings.app_name)

    registry = build_registry(settings)
    store = build_store(settings, table_mappings)
    actors = build_actor_lookup(settings, store)
    formatters = formatters or FormatterRegistry()

    presenter = RevisionPresenter(
        registry,
        store,
        actors=actors,
        formatters=formatters,
        history=settings.history,
    )

    logger.info(
        "revisionist_bootstrapped",
        backend=settings.storage.backend,
        entity_types=registry.entity_types,
        format_kinds=formatters.kinds,
    )

    return presenter, BootstrapContext(
        settings=settings,
        registry=registry,
        store=store,
        actors=actors,
        formatters=formatters,
    )
