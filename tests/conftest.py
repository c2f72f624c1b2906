"""Pytest configuration and shared fixtures."""

from typing import Any

import pytest
from faker import Faker

from seedsmith import Seeder, UniquenessRegistry
from seedsmith.generators import FieldValueGenerator


class FakeCollection:
    """In-memory stand-in for a pymongo collection."""

    def __init__(self):
        self.batches: list[list[dict[str, Any]]] = []

    def insert_many(self, documents):
        self.batches.append([dict(doc) for doc in documents])

    @property
    def documents(self) -> list[dict[str, Any]]:
        return [doc for batch in self.batches for doc in batch]


class FakeDatabase:
    """
    In-memory stand-in for a pymongo database.

    Collections are created on first access, like the real driver.
    Records every insert call so tests can check batching and ordering.
    """

    def __init__(self):
        self.collections: dict[str, FakeCollection] = {}
        self.calls: list[str] = []

    def __getitem__(self, name: str) -> FakeCollection:
        self.calls.append(name)
        if name not in self.collections:
            self.collections[name] = FakeCollection()
        return self.collections[name]

    def get_data(self, name: str) -> list[dict[str, Any]]:
        if name not in self.collections:
            return []
        return self.collections[name].documents


@pytest.fixture
def fake() -> Faker:
    """Seeded Faker instance for reproducible draws."""
    instance = Faker("en_US")
    instance.seed_instance(1234)
    return instance


@pytest.fixture
def registry() -> UniquenessRegistry:
    return UniquenessRegistry()


@pytest.fixture
def generator(fake: Faker, registry: UniquenessRegistry) -> FieldValueGenerator:
    """Field generator with a fresh registry per test."""
    return FieldValueGenerator(fake=fake, registry=registry)


@pytest.fixture
def database() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def seeder(database: FakeDatabase) -> Seeder:
    """Seeder writing to an in-memory mongo-style database."""
    return Seeder("mongo", client=database, seed=1234, verbose=False)
