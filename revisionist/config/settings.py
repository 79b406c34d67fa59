"""Root settings model for revisionist configuration."""

from typing import Any

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from revisionist.config.models.display import ActorsConfig, DisplayConfig, HistoryConfig
from revisionist.config.models.observability import ObservabilityConfig
from revisionist.config.models.storage import StorageConfig
from revisionist.schema.models import EntityDefinition

# TOML config consumed by the custom settings source
_toml_config: dict[str, Any] = {}


def set_toml_config(config: dict[str, Any]) -> None:
    """Set the TOML configuration to be used by Settings."""
    global _toml_config
    _toml_config = config


class TomlConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings source that reads from the loaded TOML configuration."""

    def get_field_value(
        self, field: Any, field_name: str  # noqa: ARG002
    ) -> tuple[Any, str, bool]:
        """Get field value from TOML config."""
        value = _toml_config.get(field_name)
        return value, field_name, value is not None

    def __call__(self) -> dict[str, Any]:
        """Return the TOML config values."""
        return _toml_config.copy()


class Settings(BaseSettings):
    """Root configuration object.

    Configuration is loaded in this order:
    1. Pydantic model defaults (in code)
    2. config/default.toml (base configuration)
    3. config/{REVISIONIST_ENV}.toml (environment overrides)
    4. REVISIONIST_* environment variables (runtime overrides)
    """

    model_config = SettingsConfigDict(
        env_prefix="REVISIONIST_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(
        default="revisionist",
        description="Bound into every log event as 'app'",
    )

    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Observability configuration",
    )
    display: DisplayConfig = Field(
        default_factory=DisplayConfig,
        description="Fallback display strings",
    )
    history: HistoryConfig = Field(
        default_factory=HistoryConfig,
        description="Owning entity lookup behavior",
    )
    actors: ActorsConfig = Field(
        default_factory=ActorsConfig,
        description="Actor lookup configuration",
    )
    storage: StorageConfig = Field(
        default_factory=StorageConfig,
        description="Entity store backend configuration",
    )
    entities: dict[str, EntityDefinition] = Field(
        default_factory=dict,
        description="Declarative entity schemas keyed by entity type",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Priority: constructor arguments, REVISIONIST_* env vars, TOML files."""
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )
