"""
Dependency injection container for FastAPI.

Provides service instances to route handlers.
"""

from functools import lru_cache

from src.application.services import (
    get_process_lifecycle_service,
    get_reconciliation_service,
    get_reporting_service,
    get_snapshot_service,
    get_stock_ledger_service,
)
from src.application.use_cases import (
    ExportSnapshotUseCase,
    FinalizeProcessUseCase,
    ImportSnapshotUseCase,
    IssueStockUseCase,
    ReceiveStockUseCase,
    StartProcessUseCase,
)
from src.config import Settings, get_settings
from src.core.services import (
    OutputReconciliationService,
    ProcessLifecycleService,
    ReportingService,
    StockLedgerService,
)


@lru_cache
def get_app_settings() -> Settings:
    """Get cached application settings."""
    return get_settings()


# Service dependencies
def get_ledger() -> StockLedgerService:
    """Get stock ledger service."""
    return get_stock_ledger_service()


def get_lifecycle() -> ProcessLifecycleService:
    """Get process lifecycle service."""
    return get_process_lifecycle_service()


def get_reconciliation() -> OutputReconciliationService:
    """Get output reconciliation service."""
    return get_reconciliation_service()


def get_reporting() -> ReportingService:
    """Get reporting service."""
    return get_reporting_service()


# Use case dependencies
def get_receive_stock_use_case() -> ReceiveStockUseCase:
    """Get deposit use case."""
    return ReceiveStockUseCase(get_stock_ledger_service())


def get_issue_stock_use_case() -> IssueStockUseCase:
    """Get withdraw use case."""
    return IssueStockUseCase(get_stock_ledger_service())


def get_start_process_use_case() -> StartProcessUseCase:
    """Get start process use case."""
    return StartProcessUseCase(get_process_lifecycle_service())


def get_finalize_process_use_case() -> FinalizeProcessUseCase:
    """Get finalize process use case."""
    return FinalizeProcessUseCase(get_reconciliation_service())


def get_export_snapshot_use_case() -> ExportSnapshotUseCase:
    """Get export use case."""
    return ExportSnapshotUseCase(get_snapshot_service())


def get_import_snapshot_use_case() -> ImportSnapshotUseCase:
    """Get import use case."""
    return ImportSnapshotUseCase(get_snapshot_service())
