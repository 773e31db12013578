"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import psycopg
from psycopg import AsyncConnection
from psycopg_pool import AsyncConnectionPool

from quoteserve.domain.exceptions import StorageFailure
from quoteserve.infrastructure.persistence.postgres.quote_repository import (
    PostgresQuoteRepository,
)


class PostgresUnitOfWork:
    """One pooled connection, one transaction, one quote repository."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn
        self._quotes = PostgresQuoteRepository(conn)

    @property
    def quotes(self) -> PostgresQuoteRepository:
        return self._quotes

    async def commit(self) -> None:
        await self._conn.commit()

    async def rollback(self) -> None:
        await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager).

    Commits when the block succeeds and rolls back otherwise. Database
    errors, including failing to get a connection, surface as StorageFailure.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        try:
            async with pool.connection() as conn:
                uow = PostgresUnitOfWork(conn)
                try:
                    yield uow
                    await uow.commit()
                except BaseException:
                    await uow.rollback()
                    raise
        except psycopg.Error as e:
            raise StorageFailure(str(e)) from e

    return factory
