"""Tests for the SQLite connection pool and transaction scopes."""

import asyncio
from pathlib import Path
from unittest.mock import patch

import aiosqlite
import pytest

import src.infrastructure.storage.sqlite.connection as conn_module
from src.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
    in_transaction,
)


@pytest.fixture
async def pool(initialized_db: Path):
    pool = ConnectionPool(initialized_db, pool_size=2, busy_timeout=50)
    await pool.initialize()
    yield pool
    await pool.close()


@pytest.fixture
async def global_pool(initialized_db: Path, mock_settings):
    """The module-level pool pointed at the migrated test database."""
    conn_module._pool = None
    with patch.object(conn_module, "get_settings", return_value=mock_settings):
        yield await get_pool()
        await close_pool()


async def _count_diameters(conn: aiosqlite.Connection) -> int:
    cursor = await conn.execute("SELECT COUNT(*) FROM diameters")
    return (await cursor.fetchone())[0]


class TestConnectionPool:
    async def test_connection_settings(self, pool: ConnectionPool):
        async with pool.acquire() as conn:
            cursor = await conn.execute("PRAGMA journal_mode")
            assert (await cursor.fetchone())[0].lower() == "wal"
            cursor = await conn.execute("PRAGMA foreign_keys")
            assert (await cursor.fetchone())[0] == 1
            cursor = await conn.execute("PRAGMA busy_timeout")
            assert (await cursor.fetchone())[0] == 50
            assert conn.row_factory is aiosqlite.Row

    async def test_initialize_is_idempotent(self, pool: ConnectionPool):
        await pool.initialize()
        assert len(pool._connections) == 2

    async def test_connection_returned_after_error(self, pool: ConnectionPool):
        with pytest.raises(ValueError):
            async with pool.acquire():
                raise ValueError("boom")
        assert pool._pool.qsize() == 2

    async def test_acquire_waits_when_exhausted(self, pool: ConnectionPool):
        async with pool.acquire(), pool.acquire():
            with pytest.raises(TimeoutError):
                async with asyncio.timeout(0.1), pool.acquire():
                    pass

    async def test_close_resets_pool(self, pool: ConnectionPool):
        await pool.close()
        assert pool._connections == []
        assert pool._initialized is False


class TestPoolTransaction:
    async def test_commits_on_success(self, pool: ConnectionPool):
        async with pool.transaction() as conn:
            await conn.execute("INSERT INTO diameters (diameter) VALUES (12.0)")

        async with pool.acquire() as conn:
            assert await _count_diameters(conn) == 1

    async def test_rolls_back_on_error(self, pool: ConnectionPool):
        with pytest.raises(RuntimeError):
            async with pool.transaction() as conn:
                await conn.execute("INSERT INTO diameters (diameter) VALUES (16.0)")
                raise RuntimeError("injected failure")

        async with pool.acquire() as conn:
            assert await _count_diameters(conn) == 0

    async def test_write_lock_taken_up_front(self, pool: ConnectionPool):
        async with pool.transaction():
            async with pool.acquire() as other:
                with pytest.raises(aiosqlite.OperationalError, match="locked"):
                    await other.execute("BEGIN IMMEDIATE")

    async def test_other_connections_see_only_committed_state(self, pool: ConnectionPool):
        async with pool.transaction() as conn:
            await conn.execute("INSERT INTO diameters (diameter) VALUES (20.0)")
            async with pool.acquire() as reader:
                assert await _count_diameters(reader) == 0

        async with pool.acquire() as reader:
            assert await _count_diameters(reader) == 1

    async def test_cancellation_rolls_back(self, pool: ConnectionPool):
        started = asyncio.Event()

        async def writer():
            async with pool.transaction() as conn:
                await conn.execute("INSERT INTO diameters (diameter) VALUES (10.0)")
                started.set()
                await asyncio.sleep(10)

        task = asyncio.create_task(writer())
        await started.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        async with pool.acquire() as conn:
            assert await _count_diameters(conn) == 0


class TestGlobalPool:
    async def test_get_pool_is_singleton(self, global_pool: ConnectionPool):
        assert await get_pool() is global_pool
        assert global_pool.pool_size == 2

    async def test_close_pool_clears_singleton(self, global_pool: ConnectionPool):
        await close_pool()
        assert conn_module._pool is None
        await close_pool()


class TestAmbientTransaction:
    async def test_nested_scopes_share_connection(self, global_pool):
        assert in_transaction() is False
        async with get_transaction() as outer:
            assert in_transaction() is True
            async with get_transaction() as inner:
                assert inner is outer
            async with get_connection() as reader:
                assert reader is outer
        assert in_transaction() is False

    async def test_outer_failure_discards_nested_writes(self, global_pool):
        with pytest.raises(RuntimeError):
            async with get_transaction():
                async with get_transaction() as conn:
                    await conn.execute("INSERT INTO diameters (diameter) VALUES (20.0)")
                raise RuntimeError("injected failure")

        async with get_connection() as conn:
            assert await _count_diameters(conn) == 0

    async def test_reads_in_scope_see_own_writes(self, global_pool):
        async with get_transaction() as conn:
            await conn.execute("INSERT INTO diameters (diameter) VALUES (8.0)")
            async with get_connection() as reader:
                assert await _count_diameters(reader) == 1
