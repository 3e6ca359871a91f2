"""SQLite implementation of process group storage."""

import json

from src.config import get_logger
from src.core.entities.group import ProcessGroup
from src.core.interfaces.group_store import IGroupStore
from src.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from src.infrastructure.storage.sqlite.records import insert_model, row_to_dict

logger = get_logger(__name__)


class SQLiteGroupStore(IGroupStore):
    """SQLite implementation of process group storage."""

    async def create_group(self, group: ProcessGroup) -> ProcessGroup:
        async with get_transaction() as conn:
            await insert_model(conn, "process_groups", group)
        logger.info("process_group_created", group_id=group.id, members=len(group.process_ids))
        return group

    async def get_group(self, group_id: str) -> ProcessGroup | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM process_groups WHERE id = ?", (group_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return ProcessGroup.model_validate(row_to_dict(row))

    async def list_groups(self) -> list[ProcessGroup]:
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM process_groups ORDER BY seq")
            rows = await cursor.fetchall()
            return [ProcessGroup.model_validate(row_to_dict(row)) for row in rows]

    async def update_group(self, group: ProcessGroup) -> bool:
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "UPDATE process_groups SET name = ?, process_ids = ? WHERE id = ?",
                (group.name, json.dumps(group.process_ids), group.id),
            )
            updated = cursor.rowcount > 0
        if updated:
            logger.info("process_group_updated", group_id=group.id)
        return updated

    async def delete_group(self, group_id: str) -> bool:
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM process_groups WHERE id = ?", (group_id,)
            )
            deleted = cursor.rowcount > 0
        if deleted:
            logger.info("process_group_deleted", group_id=group_id)
        return deleted
