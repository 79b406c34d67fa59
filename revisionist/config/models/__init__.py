"""Configuration section models."""

from revisionist.config.models.display import ActorsConfig, DisplayConfig, HistoryConfig
from revisionist.config.models.observability import (
    LoggingConfig,
    ObservabilityConfig,
)
from revisionist.config.models.storage import StorageConfig

__all__ = [
    "ActorsConfig",
    "DisplayConfig",
    "HistoryConfig",
    "LoggingConfig",
    "ObservabilityConfig",
    "StorageConfig",
]
