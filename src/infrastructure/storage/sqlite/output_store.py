"""SQLite implementation of process output storage."""

from typing import TypeVar

from pydantic import BaseModel

from src.config import get_logger
from src.core.entities.output import (
    FinishedGood,
    LeftoverMaterial,
    NonConformingItem,
    ProcessSummary,
    RejectedItem,
    WeightLossItem,
)
from src.core.interfaces.output_store import IOutputStore
from src.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from src.infrastructure.storage.sqlite.records import insert_model, row_to_dict

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class SQLiteOutputStore(IOutputStore):
    """SQLite implementation of output record and summary storage."""

    async def add_finished_good(self, item: FinishedGood) -> FinishedGood:
        return await self._add("finished_goods", item)

    async def add_non_conforming(self, item: NonConformingItem) -> NonConformingItem:
        return await self._add("non_conforming_items", item)

    async def add_rejected(self, item: RejectedItem) -> RejectedItem:
        return await self._add("rejected_items", item)

    async def add_weight_loss(self, item: WeightLossItem) -> WeightLossItem:
        return await self._add("weight_loss_items", item)

    async def add_leftover(self, item: LeftoverMaterial) -> LeftoverMaterial:
        return await self._add("leftover_materials", item)

    async def add_summary(self, summary: ProcessSummary) -> ProcessSummary:
        return await self._add("process_summaries", summary)

    async def get_summary(self, process_id: str) -> ProcessSummary | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM process_summaries WHERE process_id = ?", (process_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return ProcessSummary.model_validate(row_to_dict(row))

    async def list_finished_goods(
        self, process_ids: list[str] | None = None
    ) -> list[FinishedGood]:
        return await self._list("finished_goods", FinishedGood, process_ids)

    async def list_non_conforming(
        self, process_ids: list[str] | None = None
    ) -> list[NonConformingItem]:
        return await self._list("non_conforming_items", NonConformingItem, process_ids)

    async def list_rejected(self, process_ids: list[str] | None = None) -> list[RejectedItem]:
        return await self._list("rejected_items", RejectedItem, process_ids)

    async def list_weight_loss(
        self, process_ids: list[str] | None = None
    ) -> list[WeightLossItem]:
        return await self._list("weight_loss_items", WeightLossItem, process_ids)

    async def list_leftovers(
        self, process_ids: list[str] | None = None
    ) -> list[LeftoverMaterial]:
        return await self._list("leftover_materials", LeftoverMaterial, process_ids)

    async def list_summaries(
        self, process_ids: list[str] | None = None
    ) -> list[ProcessSummary]:
        return await self._list("process_summaries", ProcessSummary, process_ids)

    @staticmethod
    async def _add(table: str, record: RecordT) -> RecordT:
        async with get_transaction() as conn:
            await insert_model(conn, table, record)
        logger.debug("output_record_stored", table=table, record_id=record.id)
        return record

    @staticmethod
    async def _list(
        table: str,
        model: type[RecordT],
        process_ids: list[str] | None,
    ) -> list[RecordT]:
        """Records in insertion order, optionally restricted to some processes."""
        if process_ids is not None and not process_ids:
            return []

        query = f"SELECT * FROM {table}"
        params: list[str] = []
        if process_ids is not None:
            query += f" WHERE process_id IN ({', '.join('?' for _ in process_ids)})"
            params.extend(process_ids)
        query += " ORDER BY seq"

        async with get_connection() as conn:
            cursor = await conn.execute(query, params)
            rows = await cursor.fetchall()
            return [model.model_validate(row_to_dict(row)) for row in rows]
