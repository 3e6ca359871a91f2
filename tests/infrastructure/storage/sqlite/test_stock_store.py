"""Tests for SQLiteStockStore."""

from pathlib import Path

import pytest

from src.core.entities import InventoryTransaction, RodStockEntry, TransactionType
from src.infrastructure.storage.sqlite.stock_store import SQLiteStockStore


@pytest.fixture
def store(ledger_db: Path) -> SQLiteStockStore:
    return SQLiteStockStore()


class TestStockEntries:
    async def test_entries_listed_in_insertion_order(self, store):
        first = await store.add_entry(RodStockEntry(diameter=12.0, weight=10.0))
        await store.add_entry(RodStockEntry(diameter=16.0, weight=4.0))
        second = await store.add_entry(RodStockEntry(diameter=12.0, weight=5.0))

        entries = await store.list_entries(12.0)

        assert [e.id for e in entries] == [first.id, second.id]
        assert len(await store.list_entries()) == 3

    async def test_round_trips_fields(self, store):
        entry = await store.add_entry(
            RodStockEntry(diameter=12.0, weight=10.0, total_length=6000.0)
        )
        stored = (await store.list_entries(12.0))[0]
        assert stored == entry

    async def test_update_and_delete(self, store):
        entry = await store.add_entry(RodStockEntry(diameter=12.0, weight=10.0))

        assert await store.update_entry_weight(entry.id, 3.0) is True
        assert await store.total_weight(12.0) == 3.0

        assert await store.delete_entry(entry.id) is True
        assert await store.delete_entry(entry.id) is False
        assert await store.total_weight(12.0) == 0.0

    async def test_weight_by_diameter(self, store):
        await store.add_entry(RodStockEntry(diameter=16.0, weight=4.0))
        await store.add_entry(RodStockEntry(diameter=12.0, weight=10.0))
        await store.add_entry(RodStockEntry(diameter=12.0, weight=5.0))

        assert await store.weight_by_diameter() == [(12.0, 15.0, 2), (16.0, 4.0, 1)]


class TestInventoryHistory:
    async def test_append_order_and_newest_first(self, store):
        lines = [
            InventoryTransaction(diameter=12.0, weight=w, type=t)
            for w, t in ((10.0, TransactionType.IN), (4.0, TransactionType.OUT))
        ]
        for line in lines:
            await store.add_transaction(line)

        assert [t.id for t in await store.list_transactions()] == [lines[0].id, lines[1].id]
        newest = await store.list_transactions(newest_first=True, limit=1)
        assert [t.id for t in newest] == [lines[1].id]

    async def test_filter_by_process(self, store):
        await store.add_transaction(
            InventoryTransaction(diameter=12.0, weight=10.0, type=TransactionType.IN)
        )
        tagged = await store.add_transaction(
            InventoryTransaction(
                diameter=12.0,
                weight=4.0,
                type=TransactionType.OUT,
                process_id="p1",
                process_name="Cut",
            )
        )

        lines = await store.list_transactions(process_id="p1")

        assert [t.id for t in lines] == [tagged.id]
        assert lines[0].type == TransactionType.OUT
        assert lines[0].process_name == "Cut"


class TestKnownDiameters:
    async def test_add_is_idempotent(self, store):
        assert await store.add_diameter(16.0) is True
        assert await store.add_diameter(12.0) is True
        assert await store.add_diameter(12.0) is False
        assert await store.list_diameters() == [12.0, 16.0]

    async def test_blade_diameters_are_separate(self, store):
        await store.add_blade_diameter(300.0)
        assert await store.list_blade_diameters() == [300.0]
        assert await store.list_diameters() == []
