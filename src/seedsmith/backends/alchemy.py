"""SQLAlchemy backend - Core INSERT executed through a session."""

from typing import Any

from sqlalchemy import column, insert, table

from seedsmith.backends.base import Backend, BackendKind, maybe_await, record_columns


class SQLAlchemyBackend(Backend):
    """
    Insert records with ``session.execute(insert(table), records)``.

    The client is a ``Session`` or ``AsyncSession``. The table is addressed
    by the model name (``schema.table`` supported) without needing mapped
    classes, and the session is committed after each batch.
    """

    kind = BackendKind.SQLALCHEMY

    @staticmethod
    def build_table(model: str, columns: list[str]):
        """Lightweight table construct for a model name and its columns."""
        schema, _, name = model.rpartition(".")
        return table(name, *(column(col) for col in columns), schema=schema or None)

    async def insert_many(self, model: str, records: list[dict[str, Any]]) -> None:
        if not records:
            return

        columns = record_columns(records)
        target = self.build_table(model, columns)
        rows = [{col: record.get(col) for col in columns} for record in records]

        await maybe_await(self.client.execute(insert(target), rows))
        await maybe_await(self.client.commit())
