"""Data models and type definitions."""

import math
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from seedsmith.exceptions import ConfigurationError

Record = dict[str, Any]
BeforeCreateHook = Callable[[Record, int], Record | Awaitable[Record]]
AfterCreateHook = Callable[[Record, int], None | Awaitable[None]]

DEFAULT_NULL_PROBABILITY = 0.1
DEFAULT_MIN = 0
DEFAULT_MAX = 1000
DEFAULT_PRECISION = 0.01


class FieldType(str, Enum):
    """Built-in generator categories."""

    # Identifiers
    UUID = "uuid"
    SLUG = "slug"

    # Text
    STRING = "string"
    WORD = "word"
    EMAIL = "email"
    PASSWORD = "password"
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    FULL_NAME = "full_name"
    PHONE = "phone"
    URL = "url"
    ADDRESS = "address"
    CITY = "city"
    COUNTRY = "country"
    ZIP_CODE = "zip_code"
    COMPANY = "company"
    JOB_TITLE = "job_title"
    SENTENCE = "sentence"
    PARAGRAPH = "paragraph"
    TEXT = "text"
    AVATAR = "avatar"
    IMAGE = "image"

    # Numeric
    INT = "int"
    NUMBER = "number"
    FLOAT = "float"
    BOOLEAN = "boolean"

    # Temporal
    DATE = "date"
    DATETIME = "datetime"
    PAST_DATE = "past_date"
    FUTURE_DATE = "future_date"

    # Structured
    JSON = "json"
    ENUM = "enum"
    CUSTOM = "custom"


NUMERIC_CATEGORIES = frozenset(
    {FieldType.INT.value, FieldType.NUMBER.value, FieldType.FLOAT.value}
)


@dataclass(frozen=True)
class FieldSpec:
    """
    Declarative description of how to generate one field's value.

    Attributes:
        type: Generator category (FieldType or a registered plugin name).
            Unknown names fall back to a random word.
        enum_values: Allowed values for 'enum' fields
        custom_fn: Callable receiving the zero-based record index ('custom')
        unique: Value must not repeat within one seeding run
        optional: Value may resolve to None
        null_probability: Chance of None when optional (0-1)
        min: Lower bound for numeric fields
        max: Upper bound for numeric fields
        precision: Step for float fields ('number', 'float')
    """

    type: FieldType | str
    enum_values: tuple[Any, ...] | None = None
    custom_fn: Callable[[int], Any] | None = None
    unique: bool = False
    optional: bool = False
    null_probability: float = DEFAULT_NULL_PROBABILITY
    min: float | None = None
    max: float | None = None
    precision: float | None = None

    def __post_init__(self) -> None:
        if self.enum_values is not None and not isinstance(self.enum_values, tuple):
            object.__setattr__(self, "enum_values", tuple(self.enum_values))

    @property
    def category(self) -> str:
        """Category label as a plain string."""
        if isinstance(self.type, FieldType):
            return self.type.value
        return str(self.type)

    def validate(self, field_name: str) -> None:
        """
        Check category-specific constraints.

        Args:
            field_name: Field name (used in error messages)

        Raises:
            ConfigurationError: If the spec cannot produce a value
        """
        category = self.category

        if category == FieldType.ENUM.value and not self.enum_values:
            raise ConfigurationError.missing_enum_values(field_name)

        if category == FieldType.CUSTOM.value and not callable(self.custom_fn):
            raise ConfigurationError.missing_custom_fn(field_name)

        if not 0 <= self.null_probability <= 1:
            raise ConfigurationError(
                field_name,
                f"null_probability must be between 0 and 1, got {self.null_probability}",
                ["Use 0.1 for about one absent value in ten"],
            )

        if self.precision is not None and self.precision <= 0:
            raise ConfigurationError(
                field_name,
                f"precision must be positive, got {self.precision}",
                ["Use a step such as 0.01 (cents) or 0.5"],
            )

        if category not in NUMERIC_CATEGORIES:
            return

        low, high = self.bounds
        if low > high:
            raise ConfigurationError(
                field_name,
                f"min ({low}) is greater than max ({high})",
                [
                    f"Swap the bounds, or set both: defaults are "
                    f"min={DEFAULT_MIN}, max={DEFAULT_MAX}",
                ],
            )

        if category == FieldType.INT.value and math.ceil(low) > math.floor(high):
            raise ConfigurationError(
                field_name,
                f"no integer lies between min ({low}) and max ({high})",
                [
                    "Widen the bounds to include a whole number",
                    "Use type='float' with a precision for fractional values",
                ],
            )

    @property
    def bounds(self) -> tuple[float, float]:
        """Numeric (min, max) with defaults applied."""
        low = self.min if self.min is not None else DEFAULT_MIN
        high = self.max if self.max is not None else DEFAULT_MAX
        return low, high


@dataclass
class RecordSpec:
    """
    Seeding job for one model.

    Attributes:
        model: Model / table / collection name
        count: Number of records to generate
        fields: Field name -> FieldSpec
        static_data: Values merged into every record (win over fields)
        before_create: Hook called with (record, index) before insertion;
            its return value (or awaited result) replaces the record
        after_create: Hook called with (record, index) after insertion
    """

    model: str
    count: int
    fields: dict[str, FieldSpec] = field(default_factory=dict)
    static_data: dict[str, Any] = field(default_factory=dict)
    before_create: BeforeCreateHook | None = None
    after_create: AfterCreateHook | None = None

    def validate(self) -> None:
        """
        Validate count and every field spec.

        Raises:
            ConfigurationError: On the first invalid setting found
        """
        if self.count < 0:
            raise ConfigurationError(
                None,
                f"Model '{self.model}': count must not be negative, got {self.count}",
                ["Use count=0 to declare a model without seeding it"],
            )

        for field_name, spec in self.fields.items():
            spec.validate(field_name)

    @property
    def generated_fields(self) -> dict[str, FieldSpec]:
        """Field specs not shadowed by static data."""
        return {
            name: spec
            for name, spec in self.fields.items()
            if name not in self.static_data
        }
