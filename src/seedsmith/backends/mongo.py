"""MongoDB backend - ``insert_many`` on the model's collection."""

from typing import Any

from seedsmith.backends.base import Backend, BackendKind, maybe_await


class MongoBackend(Backend):
    """
    Insert records with ``database[model].insert_many(records)``.

    The client is a pymongo ``Database`` or a motor ``AsyncIOMotorDatabase``;
    the driver adds an ``_id`` key to each inserted record in place.
    """

    kind = BackendKind.MONGO

    async def insert_many(self, model: str, records: list[dict[str, Any]]) -> None:
        if not records:
            return

        await maybe_await(self.client[model].insert_many(records))
