"""PostgreSQL backend - multi-row INSERT through psycopg."""

from typing import Any

import psycopg
from psycopg import sql

from seedsmith.backends.base import Backend, BackendKind, record_columns


class PostgresBackend(Backend):
    """
    Insert records with ``executemany`` on a psycopg connection.

    The model name is the table name; ``schema.table`` is quoted per part.
    Works with both ``psycopg.Connection`` and ``psycopg.AsyncConnection``
    and commits after each batch.
    """

    kind = BackendKind.POSTGRES

    @staticmethod
    def build_insert(model: str, columns: list[str]) -> sql.Composed:
        """
        Build the parametrized INSERT statement for a model.

        Args:
            model: Table name, optionally schema-qualified
            columns: Column names in parameter order

        Returns:
            Composed INSERT statement with one placeholder per column, or a
            ``DEFAULT VALUES`` insert when there are no columns
        """
        table = sql.Identifier(*model.split("."))
        if not columns:
            return sql.SQL("INSERT INTO {table} DEFAULT VALUES").format(table=table)
        return sql.SQL("INSERT INTO {table} ({columns}) VALUES ({values})").format(
            table=table,
            columns=sql.SQL(", ").join(sql.Identifier(col) for col in columns),
            values=sql.SQL(", ").join(sql.Placeholder() for _ in columns),
        )

    async def insert_many(self, model: str, records: list[dict[str, Any]]) -> None:
        if not records:
            return

        columns = record_columns(records)
        query = self.build_insert(model, columns)

        if not columns:
            # Every record is empty: one DEFAULT VALUES row each
            if isinstance(self.client, psycopg.AsyncConnection):
                async with self.client.cursor() as cur:
                    for _ in records:
                        await cur.execute(query)
                await self.client.commit()
            else:
                with self.client.cursor() as cur:
                    for _ in records:
                        cur.execute(query)
                self.client.commit()
            return

        # Flatten values: one tuple per record, None for missing keys
        params = [tuple(record.get(col) for col in columns) for record in records]

        if isinstance(self.client, psycopg.AsyncConnection):
            async with self.client.cursor() as cur:
                await cur.executemany(query, params)
            await self.client.commit()
        else:
            with self.client.cursor() as cur:
                cur.executemany(query, params)
            self.client.commit()
