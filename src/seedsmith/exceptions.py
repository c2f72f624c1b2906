"""Custom exceptions with helpful error messages."""


class SeedsmithError(Exception):
    """Base exception for seedsmith errors."""

    pass


class ConfigurationError(SeedsmithError):
    """Field or record spec is malformed."""

    def __init__(
        self,
        field_name: str | None,
        reason: str,
        suggestions: list[str] | None = None,
    ):
        self.field_name = field_name
        self.reason = reason
        self.suggestions = suggestions or []
        target = f"Field '{field_name}'" if field_name else "Seed configuration"
        message = f"{target}: {reason}"
        if self.suggestions:
            numbered = "\n".join(
                f"{n}. {tip}" for n, tip in enumerate(self.suggestions, start=1)
            )
            message += f"\n\nSuggestions:\n{numbered}"
        super().__init__(message)

    @classmethod
    def missing_enum_values(cls, field_name: str) -> "ConfigurationError":
        return cls(
            field_name,
            "enum_values is required for type 'enum'",
            [
                "Pass the allowed values:\n"
                "   FieldSpec(type='enum', enum_values=['DRAFT', 'PUBLISHED'])",
                "Use type='boolean' for two-state fields",
            ],
        )

    @classmethod
    def missing_custom_fn(cls, field_name: str) -> "ConfigurationError":
        return cls(
            field_name,
            "custom_fn is required for type 'custom'",
            [
                "Pass a callable taking the record index:\n"
                "   FieldSpec(type='custom', custom_fn=lambda i: f'SKU-{i:06d}')",
                "Register a reusable generator with register_generator()",
            ],
        )


class UniquenessExhaustedError(SeedsmithError):
    """Could not find a non-colliding value for a unique field."""

    def __init__(self, field_name: str, attempts: int):
        self.field_name = field_name
        self.attempts = attempts
        super().__init__(
            f"Could not generate a unique value for field '{field_name}' "
            f"after {attempts} attempts.\n\n"
            f"Suggestions:\n"
            f"1. Lower the record count for this model\n"
            f"2. Use a higher-cardinality type (e.g. 'uuid' instead of 'boolean')\n"
            f"3. Use a custom_fn that derives the value from the record index"
        )


class UnsupportedBackendError(SeedsmithError):
    """Backend kind is not one of the recognized kinds."""

    def __init__(self, kind: object, supported: list[str]):
        self.kind = kind
        supported_str = ", ".join(supported)
        super().__init__(
            f"Backend '{kind}' is not supported.\n\n"
            f"Supported backends: {supported_str}"
        )


class MissingClientError(SeedsmithError):
    """Backend kind is recognized but no client handle was supplied."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(
            f"Backend '{kind}' requires a client, but none was provided.\n\n"
            f"Suggestions:\n"
            f"1. Pass the client when building the seeder:\n"
            f"   Seeder('{kind}', client=...)\n"
            f"2. For 'postgres', set SEEDSMITH_DATABASE_URL and use "
            f"Seeder.from_settings()"
        )
