"""
Configuration management for seedsmith.

Settings are read from ``SEEDSMITH_*`` environment variables using Pydantic.
Everything here can also be passed to ``Seeder`` directly; settings only
supply defaults for process-level bootstrapping.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from seedsmith.backends.base import BackendKind
from seedsmith.generators.field_generator import MAX_UNIQUE_ATTEMPTS


class SeederSettings(BaseSettings):
    """Seeder configuration loaded from the environment."""

    model_config = SettingsConfigDict(env_prefix="SEEDSMITH_")

    backend: str = Field(
        default=BackendKind.POSTGRES.value,
        description="Backend kind: postgres, sqlalchemy, django or mongo",
    )
    database_url: Optional[str] = Field(
        default=None,
        description="PostgreSQL connection URL (postgres backend without a client)",
    )
    locale: str = Field(default="en_US", description="Faker locale")
    seed: Optional[int] = Field(
        default=None, description="Faker seed for reproducible runs"
    )
    verbose: bool = Field(
        default=True, description="Log per-model progress at INFO level"
    )
    max_unique_attempts: int = Field(
        default=MAX_UNIQUE_ATTEMPTS,
        ge=0,
        description="Re-draws allowed per unique value before failing",
    )
