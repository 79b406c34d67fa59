"""Entity store backend configuration models."""

from typing import Literal

from pydantic import BaseModel, Field

BackendType = Literal["inmemory", "sqlalchemy"]


class StorageConfig(BaseModel):
    """Configuration for the entity store read path."""

    backend: BackendType = Field(
        default="inmemory",
        description="Backend type",
    )
    connection_url: str | None = Field(
        default=None,
        description="SQLAlchemy connection URL (from env var)",
    )
    pool_size: int = Field(
        default=5,
        gt=0,
        description="Connection pool size",
    )
    pool_timeout: int = Field(
        default=30,
        gt=0,
        description="Pool timeout in seconds",
    )
    echo: bool = Field(default=False, description="Log emitted SQL")
