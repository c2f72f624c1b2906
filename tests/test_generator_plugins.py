"""Tests for custom generator plugin system."""

import pytest

from seedsmith import (
    BaseGenerator,
    ConfigurationError,
    FieldSpec,
    PluginRegistry,
    RecordSpec,
    Seeder,
    UniquenessExhaustedError,
    clear_generators,
    list_generators,
    register_generator,
)
from seedsmith.generators import FieldValueGenerator


class SKUGenerator(BaseGenerator):
    def generate(self, field_name, spec, **context):
        return f"SKU-{context['index']:06d}"


@pytest.fixture
def plugins():
    """Plugin registry private to one test."""
    return PluginRegistry()


@pytest.fixture
def plugin_generator(fake, registry, plugins):
    """Field generator reading categories from the private registry."""
    return FieldValueGenerator(fake=fake, registry=registry, plugins=plugins)


@pytest.fixture
def default_plugins_cleared():
    """Reset the default registry after tests that touch it."""
    yield
    clear_generators()


def test_register_custom_generator(plugins, plugin_generator):
    """Test registering and using a custom category."""
    plugins.register("sku", SKUGenerator)

    assert "sku" in plugins
    assert plugins.names() == ["sku"]

    values = [
        plugin_generator.generate("sku", FieldSpec(type="sku"), i) for i in range(3)
    ]

    assert values == ["SKU-000000", "SKU-000001", "SKU-000002"]


def test_register_plugin_instance(plugins, plugin_generator):
    """Test an already-built plugin object is used as is."""

    class PrefixGenerator(BaseGenerator):
        def __init__(self, prefix):
            self.prefix = prefix

        def generate(self, field_name, spec, **context):
            return f"{self.prefix}-{context['index']}"

    instance = PrefixGenerator("ORD")
    plugins.register("order_code", instance)

    assert plugins.get("order_code") is instance
    assert plugin_generator.generate("code", FieldSpec(type="order_code"), 5) == "ORD-5"


def test_custom_generator_receives_context(plugins, plugin_generator, fake):
    """Test plugins receive the spec, index and Faker instance."""
    seen = {}

    class ContextGenerator(BaseGenerator):
        def generate(self, field_name, spec, **context):
            seen.update(field_name=field_name, spec=spec, **context)
            return context["fake"].word()

    plugins.register("ctx", ContextGenerator)
    spec = FieldSpec(type="ctx", min=1, max=2)

    plugin_generator.generate("label", spec, 7)

    assert seen["field_name"] == "label"
    assert seen["spec"] is spec
    assert seen["index"] == 7
    assert seen["fake"] is fake


def test_custom_generator_respects_unique(plugins, plugin_generator):
    """Test unique applies to plugin values too."""

    class ConstantGenerator(BaseGenerator):
        def generate(self, field_name, spec, **context):
            return "fixed"

    plugins.register("constant", ConstantGenerator)
    spec = FieldSpec(type="constant", unique=True)

    plugin_generator.generate("code", spec, 0)

    with pytest.raises(UniquenessExhaustedError):
        plugin_generator.generate("code", spec, 1)


def test_registries_are_isolated(fake, registry, plugins):
    """Test a category on one registry is unknown to another."""
    plugins.register("sku", SKUGenerator)
    other = FieldValueGenerator(fake=fake, registry=registry, plugins=PluginRegistry())

    value = other.generate("sku", FieldSpec(type="sku"), 0)

    # Unknown categories fall back to a plain word
    assert not value.startswith("SKU-")
    assert "sku" not in list_generators()


@pytest.mark.asyncio
async def test_custom_generator_in_seed(plugins, database):
    """Test plugin categories work through a full seed run."""
    plugins.register("sku", SKUGenerator)
    seeder = Seeder("mongo", client=database, seed=1234, plugins=plugins)

    await seeder.seed(
        RecordSpec(model="product", count=4, fields={"sku": FieldSpec(type="sku")})
    )

    skus = [row["sku"] for row in database.get_data("product")]
    assert skus == [f"SKU-{i:06d}" for i in range(4)]


def test_register_rejects_class_without_generate(plugins):
    """Test classes without generate() are rejected."""

    class NotAGenerator:
        pass

    with pytest.raises(ValueError, match="must define generate"):
        plugins.register("broken", NotAGenerator)

    assert "broken" not in plugins


def test_register_rejects_builtin_name(plugins):
    """Test built-in categories cannot be shadowed."""
    with pytest.raises(ConfigurationError, match="built-in category") as exc_info:
        plugins.register("email", SKUGenerator)

    assert exc_info.value.suggestions[0] == "Pick another label, e.g. 'email_custom'"
    assert "enum_values" not in str(exc_info.value)


@pytest.mark.usefixtures("default_plugins_cleared")
def test_default_registry_backs_module_functions(generator):
    """Test register_generator() feeds generators built without plugins=."""
    register_generator("sku", SKUGenerator)

    assert list_generators() == ["sku"]
    assert generator.generate("sku", FieldSpec(type="sku"), 2) == "SKU-000002"

    clear_generators()
    assert list_generators() == []
