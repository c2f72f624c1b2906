"""Base generator interface."""

from abc import ABC, abstractmethod
from typing import Any

from seedsmith.models import FieldSpec


class BaseGenerator(ABC):
    """
    Base class for custom generators.

    Subclass this to add a field category beyond the built-in ones, then
    register it and refer to it by name in a FieldSpec.

    Example:
        >>> class SKUGenerator(BaseGenerator):
        ...     def generate(self, field_name, spec, **context):
        ...         index = context.get('index', 0)
        ...         return f"SKU-{index:06d}"
        >>>
        >>> register_generator('sku', SKUGenerator)
        >>> RecordSpec("product", count=100, fields={"sku": FieldSpec(type="sku")})
    """

    @abstractmethod
    def generate(self, field_name: str, spec: FieldSpec, **context: Any) -> Any:
        """
        Generate a value for a field.

        Args:
            field_name: Field name being generated
            spec: FieldSpec of the field (min/max/precision etc. available)
            **context: Additional context:
                - index: Record index (0-based)
                - fake: Faker instance owning the run's randomness

        Returns:
            Generated value for the field

        Example:
            >>> def generate(self, field_name, spec, **context):
            ...     fake = context['fake']
            ...     return f"{fake.word().upper()}-{context['index']:05d}"
        """
        pass
