"""Core interfaces (ports) for dependency injection."""

from src.core.interfaces.group_store import IGroupStore
from src.core.interfaces.output_store import IOutputStore
from src.core.interfaces.process_store import IProcessStore
from src.core.interfaces.snapshot_store import ISnapshotStore
from src.core.interfaces.stock_store import IStockStore
from src.core.interfaces.unit_of_work import IUnitOfWork

__all__ = [
    # Storage interfaces
    "IStockStore",
    "IProcessStore",
    "IOutputStore",
    "IGroupStore",
    "ISnapshotStore",
    # Transactions
    "IUnitOfWork",
]
