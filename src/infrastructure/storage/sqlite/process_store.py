"""SQLite implementation of process storage."""

from datetime import datetime

from src.config import get_logger
from src.core.entities.process import Process, ProcessStatus
from src.core.interfaces.process_store import IProcessStore
from src.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from src.infrastructure.storage.sqlite.records import insert_model, row_to_dict

logger = get_logger(__name__)


class SQLiteProcessStore(IProcessStore):
    """SQLite implementation of manufacturing process storage."""

    async def create_process(self, process: Process) -> Process:
        """Store a new process."""
        async with get_transaction() as conn:
            await insert_model(conn, "processes", process)
        logger.debug("process_stored", id=process.id, process_id=process.process_id)
        return process

    async def get_process(self, process_id: str) -> Process | None:
        """Get process by internal ID."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM processes WHERE id = ?", (process_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return Process.model_validate(row_to_dict(row))

    async def get_by_process_code(self, code: str) -> Process | None:
        """Get process by its human-readable process id."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM processes WHERE process_id = ?", (code,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return Process.model_validate(row_to_dict(row))

    async def list_processes(self, status: ProcessStatus | None = None) -> list[Process]:
        """List processes in creation order."""
        async with get_connection() as conn:
            if status is None:
                cursor = await conn.execute("SELECT * FROM processes ORDER BY seq")
            else:
                cursor = await conn.execute(
                    "SELECT * FROM processes WHERE status = ? ORDER BY seq",
                    (status.value,),
                )
            rows = await cursor.fetchall()
            return [Process.model_validate(row_to_dict(row)) for row in rows]

    async def mark_completed(self, process_id: str, completed_at: datetime) -> bool:
        """Conditionally move an in-progress process to completed."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                UPDATE processes SET status = ?, completed_at = ?
                WHERE id = ? AND status = ?
                """,
                (
                    ProcessStatus.COMPLETED.value,
                    completed_at.isoformat(),
                    process_id,
                    ProcessStatus.IN_PROGRESS.value,
                ),
            )
            return cursor.rowcount == 1
