"""Layered TOML configuration loading.

Layers are read in order and merged table by table:

1. config/default.toml (required)
2. config/{REVISIONIST_ENV}.toml (optional)

Entity tables are checked once the layers are merged; an invalid
``[entities.*]`` table fails with the entity and its files named.
"""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from revisionist.errors import (
    ConfigFileError,
    InvalidEntityDefinitionError,
    InvalidFormatRuleError,
)
from revisionist.schema.models import EntityDefinition

CONFIG_DIR_ENV = "REVISIONIST_CONFIG_DIR"
ENVIRONMENT_ENV = "REVISIONIST_ENV"
DEFAULT_ENVIRONMENT = "development"
DEFAULT_FILE = "default.toml"
ENTITIES_TABLE = "entities"


@dataclass(frozen=True)
class ConfigLayer:
    """One parsed configuration file."""

    path: Path
    data: dict[str, Any]

    def defines_entity(self, entity_type: str) -> bool:
        tables = self.data.get(ENTITIES_TABLE)
        return isinstance(tables, dict) and entity_type in tables


def get_environment() -> str:
    return os.environ.get(ENVIRONMENT_ENV, DEFAULT_ENVIRONMENT)


def get_config_dir() -> Path:
    """Directory holding default.toml.

    REVISIONIST_CONFIG_DIR wins; otherwise the first 'config/default.toml'
    found walking up from the working directory.
    """
    configured = os.environ.get(CONFIG_DIR_ENV)
    if configured:
        path = Path(configured)
        if not path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {configured}")
        return path

    cwd = Path.cwd()
    for directory in (cwd, *cwd.parents):
        candidate = directory / "config"
        if (candidate / DEFAULT_FILE).is_file():
            return candidate
    return cwd / "config"


def read_layer(path: Path) -> ConfigLayer:
    """Parse one TOML file.

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigFileError: If the file is not valid TOML
    """
    try:
        with path.open("rb") as f:
            return ConfigLayer(path=path, data=tomllib.load(f))
    except tomllib.TOMLDecodeError as e:
        raise ConfigFileError(str(path), e) from e


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Tables merge key by key; any other override value replaces the base value."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def validate_entities(config: dict[str, Any], layers: list[ConfigLayer]) -> None:
    """Check every merged [entities.*] table against EntityDefinition.

    Raises:
        InvalidEntityDefinitionError: Naming the entity and the files defining it
    """
    entities = config.get(ENTITIES_TABLE, {})
    if not isinstance(entities, dict):
        raise InvalidEntityDefinitionError(
            ENTITIES_TABLE,
            [str(layer.path) for layer in layers],
            "'entities' must be a table of entity types",
        )

    for entity_type, table in entities.items():
        sources = [str(layer.path) for layer in layers if layer.defines_entity(entity_type)]
        try:
            EntityDefinition.model_validate(table)
        except ValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(part) for part in error['loc']) or entity_type}: {error['msg']}"
                for error in e.errors()
            )
            raise InvalidEntityDefinitionError(entity_type, sources, details) from e
        except InvalidFormatRuleError as e:
            raise InvalidEntityDefinitionError(entity_type, sources, e.message) from e


def load_config(
    environment: str | None = None,
    config_dir: Path | None = None,
) -> dict[str, Any]:
    """Read, merge and check the configuration layers.

    Raises:
        FileNotFoundError: If default.toml is missing
        ConfigFileError: If a layer is not valid TOML
        InvalidEntityDefinitionError: If an entity table is invalid
    """
    config_dir = config_dir or get_config_dir()
    environment = environment or get_environment()

    default_path = config_dir / DEFAULT_FILE
    if not default_path.is_file():
        raise FileNotFoundError(
            f"Default configuration file not found: {default_path}. "
            f"Create config/{DEFAULT_FILE} or set {CONFIG_DIR_ENV}."
        )

    layers = [read_layer(default_path)]
    env_path = config_dir / f"{environment}.toml"
    if env_path.is_file():
        layers.append(read_layer(env_path))

    config: dict[str, Any] = {}
    for layer in layers:
        config = deep_merge(config, layer.data)

    validate_entities(config, layers)
    return config
