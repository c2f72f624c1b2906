"""
seedsmith - Declarative Seed Data Generation

Generates fake records from field specs with Faker and bulk-inserts them
through PostgreSQL, SQLAlchemy, Django or MongoDB clients.
"""

from seedsmith.backends import BackendKind
from seedsmith.config import SeederSettings
from seedsmith.exceptions import (
    ConfigurationError,
    MissingClientError,
    SeedsmithError,
    UniquenessExhaustedError,
    UnsupportedBackendError,
)
from seedsmith.generators import BaseGenerator, FieldValueGenerator
from seedsmith.generators.plugins import (
    PluginRegistry,
    clear_generators,
    list_generators,
    register_generator,
)
from seedsmith.models import FieldSpec, FieldType, RecordSpec
from seedsmith.registry import UniquenessRegistry
from seedsmith.seeder import Seeder

__version__ = "0.1.0"

__all__ = [
    "Seeder",
    "RecordSpec",
    "FieldSpec",
    "FieldType",
    "FieldValueGenerator",
    "UniquenessRegistry",
    "BackendKind",
    "SeederSettings",
    "BaseGenerator",
    "PluginRegistry",
    "register_generator",
    "list_generators",
    "clear_generators",
    "SeedsmithError",
    "ConfigurationError",
    "UniquenessExhaustedError",
    "UnsupportedBackendError",
    "MissingClientError",
]
