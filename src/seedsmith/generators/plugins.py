"""Extra field categories supplied by BaseGenerator plugins."""

from typing import Any

from seedsmith.exceptions import ConfigurationError
from seedsmith.models import FieldType

BUILTIN_CATEGORIES = frozenset(member.value for member in FieldType)


class PluginRegistry:
    """
    Category name -> plugin instance.

    A FieldValueGenerator consults its plugin registry for any category that
    has no built-in Faker mapping. Each seeder can own its registry; the
    module-level ``default_plugins`` backs ``register_generator()`` and is
    used when none is passed.
    """

    def __init__(self) -> None:
        self._plugins: dict[str, Any] = {}

    def register(self, name: str, plugin: Any) -> None:
        """
        Add a category backed by a plugin.

        Args:
            name: Category label to use as FieldSpec.type
            plugin: BaseGenerator subclass (instantiated once, no arguments)
                or an object with a ``generate`` method

        Raises:
            ValueError: If the plugin has no generate method
            ConfigurationError: If name is a built-in category
        """
        if not callable(getattr(plugin, "generate", None)):
            label = getattr(plugin, "__name__", type(plugin).__name__)
            raise ValueError(
                f"Plugin for category '{name}' must define generate(); "
                f"{label} does not."
            )
        if name in BUILTIN_CATEGORIES:
            raise ConfigurationError(
                None,
                f"'{name}' is a built-in category and cannot be re-registered",
                [
                    f"Pick another label, e.g. '{name}_custom'",
                    "Use type='custom' with custom_fn for a one-off override",
                ],
            )
        self._plugins[name] = plugin() if isinstance(plugin, type) else plugin

    def get(self, name: str) -> Any | None:
        return self._plugins.get(name)

    def names(self) -> list[str]:
        return list(self._plugins)

    def clear(self) -> None:
        self._plugins.clear()

    def __contains__(self, name: str) -> bool:
        return name in self._plugins


default_plugins = PluginRegistry()


def register_generator(name: str, plugin: Any) -> None:
    """
    Register a category on the default plugin registry.

    Example:
        >>> class SKUGenerator(BaseGenerator):
        ...     def generate(self, field_name, spec, **context):
        ...         return f"SKU-{context['index']:06d}"
        >>>
        >>> register_generator('sku', SKUGenerator)
        >>> FieldSpec(type='sku')
    """
    default_plugins.register(name, plugin)


def list_generators() -> list[str]:
    """Categories on the default plugin registry."""
    return default_plugins.names()


def clear_generators() -> None:
    """Drop every category from the default plugin registry."""
    default_plugins.clear()
