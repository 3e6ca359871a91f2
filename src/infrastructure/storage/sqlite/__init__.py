"""SQLite storage implementations."""

from src.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
    in_transaction,
)
from src.infrastructure.storage.sqlite.group_store import SQLiteGroupStore
from src.infrastructure.storage.sqlite.output_store import SQLiteOutputStore
from src.infrastructure.storage.sqlite.process_store import SQLiteProcessStore
from src.infrastructure.storage.sqlite.snapshot_store import SQLiteSnapshotStore
from src.infrastructure.storage.sqlite.stock_store import SQLiteStockStore
from src.infrastructure.storage.sqlite.unit_of_work import SQLiteUnitOfWork

# Singleton instances
_stock_store: SQLiteStockStore | None = None
_process_store: SQLiteProcessStore | None = None
_output_store: SQLiteOutputStore | None = None
_group_store: SQLiteGroupStore | None = None
_snapshot_store: SQLiteSnapshotStore | None = None
_unit_of_work: SQLiteUnitOfWork | None = None


def get_stock_store() -> SQLiteStockStore:
    """Get singleton stock store instance."""
    global _stock_store
    if _stock_store is None:
        _stock_store = SQLiteStockStore()
    return _stock_store


def get_process_store() -> SQLiteProcessStore:
    """Get singleton process store instance."""
    global _process_store
    if _process_store is None:
        _process_store = SQLiteProcessStore()
    return _process_store


def get_output_store() -> SQLiteOutputStore:
    """Get singleton output store instance."""
    global _output_store
    if _output_store is None:
        _output_store = SQLiteOutputStore()
    return _output_store


def get_group_store() -> SQLiteGroupStore:
    """Get singleton group store instance."""
    global _group_store
    if _group_store is None:
        _group_store = SQLiteGroupStore()
    return _group_store


def get_snapshot_store() -> SQLiteSnapshotStore:
    """Get singleton snapshot store instance."""
    global _snapshot_store
    if _snapshot_store is None:
        _snapshot_store = SQLiteSnapshotStore()
    return _snapshot_store


def get_unit_of_work() -> SQLiteUnitOfWork:
    """Get singleton unit of work instance."""
    global _unit_of_work
    if _unit_of_work is None:
        _unit_of_work = SQLiteUnitOfWork()
    return _unit_of_work


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
    "in_transaction",
    # Store classes
    "SQLiteStockStore",
    "SQLiteProcessStore",
    "SQLiteOutputStore",
    "SQLiteGroupStore",
    "SQLiteSnapshotStore",
    "SQLiteUnitOfWork",
    # Factory functions
    "get_stock_store",
    "get_process_store",
    "get_output_store",
    "get_group_store",
    "get_snapshot_store",
    "get_unit_of_work",
]
