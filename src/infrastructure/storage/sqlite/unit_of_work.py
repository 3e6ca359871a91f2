"""SQLite unit of work backed by the ambient connection transaction."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from src.core.interfaces.unit_of_work import IUnitOfWork
from src.infrastructure.storage.sqlite.connection import get_transaction


class SQLiteUnitOfWork(IUnitOfWork):
    """Every store call made inside transaction() joins one SQLite transaction."""

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        async with get_transaction():
            yield
