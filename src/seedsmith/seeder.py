"""Seeder API for declarative seed generation and bulk insertion."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from faker import Faker

from seedsmith.backends import Backend, BackendKind, resolve_backend
from seedsmith.backends.base import maybe_await
from seedsmith.config import SeederSettings
from seedsmith.generators.field_generator import (
    MAX_UNIQUE_ATTEMPTS,
    FieldValueGenerator,
)
from seedsmith.generators.plugins import PluginRegistry
from seedsmith.models import Record, RecordSpec
from seedsmith.registry import UniquenessRegistry

logger = logging.getLogger(__name__)


class Seeder:
    """
    Generate records from RecordSpecs and bulk-insert them per model.

    Example:
        >>> seeder = Seeder("mongo", client=mongo_client["shop"])
        >>> await seeder.seed(
        ...     RecordSpec(
        ...         model="user",
        ...         count=50,
        ...         fields={
        ...             "id": FieldSpec(type="uuid"),
        ...             "email": FieldSpec(type="email", unique=True),
        ...             "age": FieldSpec(type="int", min=18, max=80),
        ...         },
        ...         static_data={"role": "USER"},
        ...     )
        ... )
    """

    def __init__(
        self,
        backend: BackendKind | str,
        client: Any = None,
        *,
        fake: Faker | None = None,
        locale: str = "en_US",
        seed: int | None = None,
        verbose: bool = True,
        max_unique_attempts: int = MAX_UNIQUE_ATTEMPTS,
        registry: UniquenessRegistry | None = None,
        plugins: PluginRegistry | None = None,
    ):
        """
        Initialize Seeder.

        Args:
            backend: Backend kind (postgres, sqlalchemy, django, mongo)
            client: Client handle for the backend
            fake: Faker instance to draw from (overrides locale)
            locale: Faker locale when no instance is given
            seed: Seed applied to the Faker instance for reproducible runs
            verbose: Log per-model progress at INFO instead of DEBUG
            max_unique_attempts: Re-draw budget for unique fields
            registry: Uniqueness registry (default: fresh one per seeder)
            plugins: Extra field categories (default: register_generator() ones)

        Raises:
            UnsupportedBackendError: If backend kind is not recognized
            MissingClientError: If client is None
        """
        # Resolve first so a bad backend fails before any generation work
        self.backend: Backend = resolve_backend(backend, client)
        self.verbose = verbose

        # Only connections opened by from_settings() are closed by close()
        self._owned_client: Any = None

        if fake is None:
            fake = Faker(locale)
        if seed is not None:
            fake.seed_instance(seed)

        self.registry = registry if registry is not None else UniquenessRegistry()
        self.generator = FieldValueGenerator(
            fake=fake,
            registry=self.registry,
            max_unique_attempts=max_unique_attempts,
            plugins=plugins,
        )

    @classmethod
    def from_settings(
        cls, client: Any = None, settings: SeederSettings | None = None
    ) -> Seeder:
        """
        Build a Seeder from SEEDSMITH_* environment settings.

        For the postgres backend, a missing client is replaced by a psycopg
        connection to ``settings.database_url`` when one is configured. That
        connection belongs to the seeder and is closed by ``close()`` or on
        leaving ``async with``.

        Args:
            client: Client handle (optional for postgres with database_url)
            settings: Settings instance (default: loaded from environment)

        Returns:
            Configured Seeder
        """
        settings = settings or SeederSettings()
        opened = None

        if (
            client is None
            and settings.backend == BackendKind.POSTGRES.value
            and settings.database_url
        ):
            import psycopg

            client = opened = psycopg.connect(settings.database_url)

        seeder = cls(
            settings.backend,
            client,
            locale=settings.locale,
            seed=settings.seed,
            verbose=settings.verbose,
            max_unique_attempts=settings.max_unique_attempts,
        )
        seeder._owned_client = opened
        return seeder

    async def close(self) -> None:
        """Close the connection opened by from_settings(), if any."""
        if self._owned_client is not None:
            client, self._owned_client = self._owned_client, None
            await maybe_await(client.close())

    async def __aenter__(self) -> Seeder:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def _log(self, message: str) -> None:
        logger.log(logging.INFO if self.verbose else logging.DEBUG, message)

    async def seed(self, configs: RecordSpec | Iterable[RecordSpec]) -> None:
        """
        Generate and insert records for each RecordSpec, in order.

        Every spec is validated before any record is generated. Models are
        inserted one batch at a time; a failure leaves earlier models
        inserted. The uniqueness registry is cleared when the call returns
        or raises.

        Args:
            configs: One RecordSpec or an ordered iterable of them

        Raises:
            ConfigurationError: If any spec is malformed
            UniquenessExhaustedError: If a unique field runs out of values
        """
        if isinstance(configs, RecordSpec):
            config_list = [configs]
        else:
            config_list = list(configs)

        for config in config_list:
            config.validate()

        try:
            for config in config_list:
                await self._seed_model(config)
        finally:
            self.registry.clear()

    async def _seed_model(self, config: RecordSpec) -> None:
        self._log(f"Generating {config.count} records for {config.model}...")

        records = await self.build_records(config)

        await self.backend.insert_many(config.model, records)

        if config.after_create is not None:
            for index, record in enumerate(records):
                await maybe_await(config.after_create(record, index))

        self._log(f"Created {config.count} records for {config.model}")

    async def build_records(self, config: RecordSpec) -> list[Record]:
        """
        Generate records for a spec and run ``before_create``, without inserting.

        Uses the seeder's uniqueness registry but does not clear it.

        Args:
            config: Record spec

        Returns:
            Records in index order
        """
        records = []
        for index in range(config.count):
            record = self.generate_record(config, index)
            if config.before_create is not None:
                record = await maybe_await(config.before_create(record, index))
            records.append(record)
        return records

    def generate_record(self, config: RecordSpec, index: int) -> Record:
        """
        Build one record: generated field values, then static data on top.

        Fields shadowed by a static_data key are not generated.

        Args:
            config: Record spec
            index: Zero-based record index

        Returns:
            Record dict
        """
        record: Record = {}
        for field_name, spec in config.generated_fields.items():
            record[field_name] = self.generator.generate(field_name, spec, index)
        record.update(config.static_data)
        return record
