"""
Core business logic services.

Layer-pure services that depend only on:
- src/core/entities/*
- src/core/interfaces/*
- src/core/exceptions.py
- src/core/units.py

NO infrastructure imports. All dependencies injected via constructor.
"""

from src.core.services.process_lifecycle import ProcessLifecycleService
from src.core.services.reconciliation import (
    FinalizeResult,
    OutputReconciliationService,
    validate_outputs,
)
from src.core.services.reporting import ReportingService, percentage
from src.core.services.snapshot import SnapshotService, parse_snapshot
from src.core.services.stock_ledger import (
    DepositResult,
    EntryConsumption,
    StockLedgerService,
    WithdrawalResult,
    plan_withdrawal,
)

__all__ = [
    # Stock Ledger
    "StockLedgerService",
    "DepositResult",
    "WithdrawalResult",
    "EntryConsumption",
    "plan_withdrawal",
    # Process Lifecycle
    "ProcessLifecycleService",
    # Output Reconciliation
    "OutputReconciliationService",
    "FinalizeResult",
    "validate_outputs",
    # Reporting
    "ReportingService",
    "percentage",
    # Snapshot
    "SnapshotService",
    "parse_snapshot",
]
