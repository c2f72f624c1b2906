"""Per-field value generation with optional and unique handling."""

import logging
from typing import Any

from faker import Faker

from seedsmith.exceptions import UniquenessExhaustedError
from seedsmith.generators.faker_generator import FakerGenerator
from seedsmith.generators.plugins import PluginRegistry, default_plugins
from seedsmith.models import FieldSpec, FieldType
from seedsmith.registry import UniquenessRegistry

logger = logging.getLogger(__name__)

# Re-draws allowed for a unique field before giving up
MAX_UNIQUE_ATTEMPTS = 1000


class FieldValueGenerator:
    """
    Produce one value for a field from its FieldSpec.

    Generation runs in three steps:
        1. optional resolution: an optional field may short-circuit to None
        2. category dispatch: custom_fn, Faker, then plugin categories
        3. uniqueness: re-draw through step 2 until the value is new for the
           field name, up to ``max_unique_attempts`` times

    All randomness comes from the Faker instance, so seeding it with
    ``Faker.seed_instance()`` makes generation reproducible.
    """

    def __init__(
        self,
        fake: Faker | None = None,
        registry: UniquenessRegistry | None = None,
        max_unique_attempts: int = MAX_UNIQUE_ATTEMPTS,
        plugins: PluginRegistry | None = None,
    ):
        """
        Initialize generator.

        Args:
            fake: Faker instance (default: new en_US instance)
            registry: Uniqueness registry shared across a seeding run
            max_unique_attempts: Re-draw budget for unique fields
            plugins: Extra categories (default: the register_generator() registry)
        """
        self.faker_gen = FakerGenerator(fake)
        self.registry = registry if registry is not None else UniquenessRegistry()
        self.max_unique_attempts = max_unique_attempts
        self.plugins = plugins if plugins is not None else default_plugins

    @property
    def fake(self) -> Faker:
        return self.faker_gen.fake

    def generate(self, field_name: str, spec: FieldSpec, index: int) -> Any:
        """
        Generate a value for a field.

        Args:
            field_name: Field name (uniqueness bucket key)
            spec: Field spec
            index: Zero-based record index

        Returns:
            Generated value, or None for an optional field that resolved absent

        Raises:
            ConfigurationError: If the spec cannot produce a value
            UniquenessExhaustedError: If no unique value found within budget
        """
        spec.validate(field_name)

        if spec.optional and self.fake.random.random() < spec.null_probability:
            return None

        value = self._dispatch(field_name, spec, index)

        if spec.unique and value is not None:
            value = self._ensure_unique(field_name, spec, index, value)

        return value

    def _dispatch(self, field_name: str, spec: FieldSpec, index: int) -> Any:
        category = spec.category

        if category == FieldType.CUSTOM.value:
            return spec.custom_fn(index)

        if not self.faker_gen.supports(category):
            plugin = self.plugins.get(category)
            if plugin is not None:
                return plugin.generate(field_name, spec, index=index, fake=self.fake)
            logger.debug(
                f"Field '{field_name}' has unknown type '{category}', "
                f"falling back to a random word"
            )

        return self.faker_gen.generate(spec)

    def _ensure_unique(
        self, field_name: str, spec: FieldSpec, index: int, value: Any
    ) -> Any:
        attempts = 0
        while self.registry.contains(field_name, value):
            if attempts >= self.max_unique_attempts:
                raise UniquenessExhaustedError(field_name, attempts)
            value = self._dispatch(field_name, spec, index)
            attempts += 1

        if attempts:
            logger.debug(
                f"Field '{field_name}' needed {attempts} re-draws for a unique value"
            )

        self.registry.add(field_name, value)
        return value
