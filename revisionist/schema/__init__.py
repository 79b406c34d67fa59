"""Entity schemas: declarative definitions, rendering hooks and the registry."""

from revisionist.schema.models import (
    EntityDefinition,
    EntitySchema,
    ReferenceContext,
)
from revisionist.schema.provider import SchemaProvider
from revisionist.schema.registry import SchemaRegistry

__all__ = [
    "EntityDefinition",
    "EntitySchema",
    "ReferenceContext",
    "SchemaProvider",
    "SchemaRegistry",
]
