"""Backend interface and shared helpers."""

import inspect
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar


class BackendKind(str, Enum):
    """Recognized persistence backends."""

    POSTGRES = "postgres"
    SQLALCHEMY = "sqlalchemy"
    DJANGO = "django"
    MONGO = "mongo"


async def maybe_await(result: Any) -> Any:
    """Await ``result`` if it is awaitable, else return it as-is."""
    if inspect.isawaitable(result):
        return await result
    return result


class Backend(ABC):
    """
    Bulk-insert target for generated records.

    Each backend kind maps the model name onto exactly one bulk-insert call
    on its client. Clients may be sync or async; results are awaited when
    awaitable.
    """

    kind: ClassVar[BackendKind]

    def __init__(self, client: Any):
        """
        Initialize backend.

        Args:
            client: Backend-specific client handle
        """
        self.client = client

    @abstractmethod
    async def insert_many(self, model: str, records: list[dict[str, Any]]) -> None:
        """
        Insert a batch of records for a model.

        Args:
            model: Model / table / collection name
            records: Records in insertion order
        """
        pass


def record_columns(records: list[dict[str, Any]]) -> list[str]:
    """Union of record keys, in first-seen order."""
    columns: dict[str, None] = {}
    for record in records:
        for key in record:
            columns.setdefault(key, None)
    return list(columns)
