"""Backend selection by kind."""

from typing import Any

from seedsmith.backends.alchemy import SQLAlchemyBackend
from seedsmith.backends.base import Backend, BackendKind
from seedsmith.backends.django_orm import DjangoBackend
from seedsmith.backends.mongo import MongoBackend
from seedsmith.backends.postgres import PostgresBackend
from seedsmith.exceptions import MissingClientError, UnsupportedBackendError

BACKENDS: dict[BackendKind, type[Backend]] = {
    BackendKind.POSTGRES: PostgresBackend,
    BackendKind.SQLALCHEMY: SQLAlchemyBackend,
    BackendKind.DJANGO: DjangoBackend,
    BackendKind.MONGO: MongoBackend,
}


def resolve_backend(kind: BackendKind | str, client: Any) -> Backend:
    """
    Build the backend for a kind.

    Args:
        kind: Backend kind (enum member or its string value)
        client: Client handle for the backend

    Returns:
        Backend instance wrapping the client

    Raises:
        UnsupportedBackendError: If kind is not recognized
        MissingClientError: If client is None
    """
    try:
        backend_kind = BackendKind(kind)
    except ValueError:
        raise UnsupportedBackendError(kind, [k.value for k in BackendKind]) from None

    if client is None:
        raise MissingClientError(backend_kind.value)

    return BACKENDS[backend_kind](client)
