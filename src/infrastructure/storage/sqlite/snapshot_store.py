"""SQLite implementation of whole-collection dump and replace."""

from typing import Any

import aiosqlite
from pydantic import BaseModel

from src.config import get_logger
from src.core.entities.snapshot import CollectionKind
from src.core.exceptions import SnapshotError
from src.core.interfaces.snapshot_store import ISnapshotStore
from src.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from src.infrastructure.storage.sqlite.records import (
    COLLECTION_TABLES,
    insert_model,
    row_to_dict,
)

logger = get_logger(__name__)


class SQLiteSnapshotStore(ISnapshotStore):
    """Bulk access to every ledger table, keyed by collection kind."""

    async def dump(self, kind: CollectionKind) -> list[dict[str, Any]]:
        table = COLLECTION_TABLES[kind]
        async with get_connection() as conn:
            cursor = await conn.execute(f"SELECT * FROM {table} ORDER BY seq")
            rows = await cursor.fetchall()
            return [row_to_dict(row) for row in rows]

    async def replace(self, kind: CollectionKind, records: list[BaseModel]) -> int:
        """
        Clear a collection and insert the given records.

        Raises:
            SnapshotError: A record violates a table constraint (duplicate id,
                non-positive stock weight, ...).
        """
        table = COLLECTION_TABLES[kind]
        async with get_transaction() as conn:
            await conn.execute(f"DELETE FROM {table}")
            for index, record in enumerate(records):
                try:
                    await insert_model(conn, table, record)
                except aiosqlite.IntegrityError as e:
                    raise SnapshotError(
                        f"record rejected by {kind.value}",
                        [f"{kind.value}.{index}: {e}"],
                    ) from e
        logger.info("collection_replaced", collection=kind.value, count=len(records))
        return len(records)
