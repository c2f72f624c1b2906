"""Backend implementations for bulk-inserting seed data."""

from seedsmith.backends.alchemy import SQLAlchemyBackend
from seedsmith.backends.base import Backend, BackendKind
from seedsmith.backends.django_orm import DjangoBackend
from seedsmith.backends.factory import resolve_backend
from seedsmith.backends.mongo import MongoBackend
from seedsmith.backends.postgres import PostgresBackend

__all__ = [
    "Backend",
    "BackendKind",
    "DjangoBackend",
    "MongoBackend",
    "PostgresBackend",
    "SQLAlchemyBackend",
    "resolve_backend",
]
