"""Revisionist: display resolution for entity revision history.

Turns stored field changes (entity, field, old value, new value) into
human-readable labels and values, dereferencing foreign keys and applying
per-field format rules.
"""

from revisionist.errors import (
    ConfigFileError,
    InvalidEntityDefinitionError,
    RevisionistConfigurationError,
    RevisionistError,
    UnsupportedFormatKindError,
)
from revisionist.formatting import FormatRule, FormatterRegistry
from revisionist.revisions import (
    RevisionPresenter,
    RevisionRecord,
    RevisionView,
    ValueResolver,
)
from revisionist.schema import EntityDefinition, EntitySchema, SchemaRegistry

__version__ = "0.1.0"

__all__ = [
    "ConfigFileError",
    "EntityDefinition",
    "EntitySchema",
    "FormatRule",
    "FormatterRegistry",
    "InvalidEntityDefinitionError",
    "RevisionPresenter",
    "RevisionRecord",
    "RevisionView",
    "RevisionistConfigurationError",
    "RevisionistError",
    "SchemaRegistry",
    "UnsupportedFormatKindError",
    "ValueResolver",
]
