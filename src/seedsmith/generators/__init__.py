"""Data generators for field categories."""

from seedsmith.generators.base import BaseGenerator
from seedsmith.generators.faker_generator import FakerGenerator
from seedsmith.generators.field_generator import (
    MAX_UNIQUE_ATTEMPTS,
    FieldValueGenerator,
)

__all__ = [
    "BaseGenerator",
    "FakerGenerator",
    "FieldValueGenerator",
    "MAX_UNIQUE_ATTEMPTS",
]
