"""Tests for SQLiteGroupStore."""

from pathlib import Path

import pytest

from src.core.entities import ProcessGroup
from src.infrastructure.storage.sqlite.group_store import SQLiteGroupStore


@pytest.fixture
def store(ledger_db: Path) -> SQLiteGroupStore:
    return SQLiteGroupStore()


class TestSQLiteGroupStore:
    async def test_member_ids_round_trip(self, store):
        group = await store.create_group(ProcessGroup(name="Week 1", process_ids=["p1", "p2"]))

        stored = await store.get_group(group.id)

        assert stored.process_ids == ["p1", "p2"]
        assert stored.name == "Week 1"

    async def test_update(self, store):
        group = await store.create_group(ProcessGroup(name="Week 1", process_ids=["p1"]))
        group.name = "Week 2"
        group.process_ids = ["p3"]

        assert await store.update_group(group) is True

        stored = await store.get_group(group.id)
        assert stored.name == "Week 2"
        assert stored.process_ids == ["p3"]

    async def test_update_missing(self, store):
        assert await store.update_group(ProcessGroup(name="x", process_ids=[])) is False

    async def test_delete(self, store):
        group = await store.create_group(ProcessGroup(name="Week 1", process_ids=["p1"]))

        assert await store.delete_group(group.id) is True
        assert await store.delete_group(group.id) is False
        assert await store.list_groups() == []
