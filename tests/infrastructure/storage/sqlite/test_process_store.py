"""Tests for SQLiteProcessStore."""

from datetime import UTC, datetime
from pathlib import Path

import pytest

from src.core.entities import ProcessStatus
from src.infrastructure.storage.sqlite.process_store import SQLiteProcessStore


@pytest.fixture
def store(ledger_db: Path) -> SQLiteProcessStore:
    return SQLiteProcessStore()


class TestSQLiteProcessStore:
    async def test_create_and_get(self, store, sample_process):
        await store.create_process(sample_process)

        by_id = await store.get_process(sample_process.id)
        by_code = await store.get_by_process_code("PROC-TEST-00001")

        assert by_id == sample_process
        assert by_code == sample_process
        assert await store.get_process("missing") is None

    async def test_list_by_status(self, store, sample_process):
        await store.create_process(sample_process)

        assert len(await store.list_processes()) == 1
        assert len(await store.list_processes(ProcessStatus.IN_PROGRESS)) == 1
        assert await store.list_processes(ProcessStatus.COMPLETED) == []

    async def test_mark_completed_once(self, store, sample_process):
        await store.create_process(sample_process)
        now = datetime.now(UTC)

        assert await store.mark_completed(sample_process.id, now) is True
        assert await store.mark_completed(sample_process.id, now) is False

        stored = await store.get_process(sample_process.id)
        assert stored.status == ProcessStatus.COMPLETED
        assert stored.completed_at == now

    async def test_mark_completed_unknown(self, store):
        assert await store.mark_completed("missing", datetime.now(UTC)) is False
