"""Storage infrastructure implementations."""

from src.infrastructure.storage.sqlite import (
    SQLiteGroupStore,
    SQLiteOutputStore,
    SQLiteProcessStore,
    SQLiteSnapshotStore,
    SQLiteStockStore,
    SQLiteUnitOfWork,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)

__all__ = [
    # SQLite stores
    "SQLiteStockStore",
    "SQLiteProcessStore",
    "SQLiteOutputStore",
    "SQLiteGroupStore",
    "SQLiteSnapshotStore",
    "SQLiteUnitOfWork",
    # Connection pool
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
]
