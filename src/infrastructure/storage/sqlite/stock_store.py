"""SQLite implementation of rod stock and inventory history storage."""

from src.config import get_logger
from src.core.entities.stock import InventoryTransaction, RodStockEntry
from src.core.interfaces.stock_store import IStockStore
from src.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from src.infrastructure.storage.sqlite.records import insert_model, row_to_dict

logger = get_logger(__name__)


class SQLiteStockStore(IStockStore):
    """SQLite implementation of rod stock entries, ledger lines and known diameters."""

    # Stock entries

    async def add_entry(self, entry: RodStockEntry) -> RodStockEntry:
        """Store a new stock entry."""
        async with get_transaction() as conn:
            await insert_model(conn, "rod_stock", entry)
        logger.debug(
            "stock_entry_added",
            entry_id=entry.id,
            diameter=entry.diameter,
            weight=entry.weight,
        )
        return entry

    async def list_entries(self, diameter: float | None = None) -> list[RodStockEntry]:
        """List stock entries in insertion order."""
        async with get_connection() as conn:
            if diameter is None:
                cursor = await conn.execute("SELECT * FROM rod_stock ORDER BY seq")
            else:
                cursor = await conn.execute(
                    "SELECT * FROM rod_stock WHERE diameter = ? ORDER BY seq",
                    (diameter,),
                )
            rows = await cursor.fetchall()
            return [RodStockEntry.model_validate(row_to_dict(row)) for row in rows]

    async def update_entry_weight(self, entry_id: str, weight: float) -> bool:
        """Set the remaining weight of a partially consumed entry."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "UPDATE rod_stock SET weight = ? WHERE id = ?",
                (weight, entry_id),
            )
            return cursor.rowcount > 0

    async def delete_entry(self, entry_id: str) -> bool:
        """Remove a fully consumed entry."""
        async with get_transaction() as conn:
            cursor = await conn.execute("DELETE FROM rod_stock WHERE id = ?", (entry_id,))
            return cursor.rowcount > 0

    async def total_weight(self, diameter: float) -> float:
        """Sum of entry weights for a diameter."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT COALESCE(SUM(weight), 0) FROM rod_stock WHERE diameter = ?",
                (diameter,),
            )
            row = await cursor.fetchone()
            return float(row[0])

    async def weight_by_diameter(self) -> list[tuple[float, float, int]]:
        """Total weight and entry count per diameter."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT diameter, SUM(weight), COUNT(*)
                FROM rod_stock
                GROUP BY diameter
                ORDER BY diameter
                """
            )
            rows = await cursor.fetchall()
            return [(float(row[0]), float(row[1]), int(row[2])) for row in rows]

    # Inventory ledger

    async def add_transaction(self, transaction: InventoryTransaction) -> InventoryTransaction:
        """Append a ledger line."""
        async with get_transaction() as conn:
            await insert_model(conn, "inventory_transactions", transaction)
        logger.debug(
            "inventory_transaction_recorded",
            transaction_id=transaction.id,
            type=transaction.type.value,
            weight=transaction.weight,
        )
        return transaction

    async def list_transactions(
        self,
        process_id: str | None = None,
        newest_first: bool = False,
        limit: int | None = None,
    ) -> list[InventoryTransaction]:
        """List ledger lines in append order, or newest first."""
        query = "SELECT * FROM inventory_transactions"
        params: list = []
        if process_id is not None:
            query += " WHERE process_id = ?"
            params.append(process_id)
        query += " ORDER BY seq DESC" if newest_first else " ORDER BY seq"
        if limit is not None:
            query += " LIMIT ?"
            params.append(limit)

        async with get_connection() as conn:
            cursor = await conn.execute(query, params)
            rows = await cursor.fetchall()
            return [InventoryTransaction.model_validate(row_to_dict(row)) for row in rows]

    # Known diameters

    async def add_diameter(self, diameter: float) -> bool:
        return await self._add_known("diameters", diameter)

    async def list_diameters(self) -> list[float]:
        return await self._list_known("diameters")

    async def add_blade_diameter(self, diameter: float) -> bool:
        return await self._add_known("blade_diameters", diameter)

    async def list_blade_diameters(self) -> list[float]:
        return await self._list_known("blade_diameters")

    @staticmethod
    async def _add_known(table: str, diameter: float) -> bool:
        async with get_transaction() as conn:
            cursor = await conn.execute(
                f"INSERT OR IGNORE INTO {table} (diameter) VALUES (?)",
                (diameter,),
            )
            return cursor.rowcount > 0

    @staticmethod
    async def _list_known(table: str) -> list[float]:
        async with get_connection() as conn:
            cursor = await conn.execute(f"SELECT diameter FROM {table} ORDER BY diameter")
            rows = await cursor.fetchall()
            return [float(row[0]) for row in rows]
