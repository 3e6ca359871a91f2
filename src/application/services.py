"""
Service factory functions for dependency injection.

This module provides factory functions that wire infrastructure
implementations to core services. Use cases should import from here.

Clean Architecture: Application layer orchestrates DI, not core layer.
"""

from src.config import get_settings
from src.core.services import (
    OutputReconciliationService,
    ProcessLifecycleService,
    ReportingService,
    SnapshotService,
    StockLedgerService,
)

# Singleton service instances
_stock_ledger_service: StockLedgerService | None = None
_process_lifecycle_service: ProcessLifecycleService | None = None
_reconciliation_service: OutputReconciliationService | None = None
_reporting_service: ReportingService | None = None
_snapshot_service: SnapshotService | None = None


def get_stock_ledger_service() -> StockLedgerService:
    """Get or create the StockLedgerService wired to SQLite."""
    global _stock_ledger_service

    if _stock_ledger_service is None:
        # Lazy import infrastructure to avoid circular imports
        from src.infrastructure.storage.sqlite import get_stock_store, get_unit_of_work

        _stock_ledger_service = StockLedgerService(
            stock_store=get_stock_store(),
            unit_of_work=get_unit_of_work(),
            weight_decimals=get_settings().ledger.weight_decimals,
        )
    return _stock_ledger_service


def get_process_lifecycle_service() -> ProcessLifecycleService:
    """Get or create the ProcessLifecycleService."""
    global _process_lifecycle_service

    if _process_lifecycle_service is None:
        from src.infrastructure.storage.sqlite import (
            get_output_store,
            get_process_store,
            get_unit_of_work,
        )

        ledger_settings = get_settings().ledger
        _process_lifecycle_service = ProcessLifecycleService(
            ledger=get_stock_ledger_service(),
            process_store=get_process_store(),
            output_store=get_output_store(),
            unit_of_work=get_unit_of_work(),
            process_id_prefix=ledger_settings.process_id_prefix,
            weight_decimals=ledger_settings.weight_decimals,
        )
    return _process_lifecycle_service


def get_reconciliation_service() -> OutputReconciliationService:
    """Get or create the OutputReconciliationService."""
    global _reconciliation_service

    if _reconciliation_service is None:
        from src.infrastructure.storage.sqlite import (
            get_output_store,
            get_process_store,
            get_unit_of_work,
        )

        ledger_settings = get_settings().ledger
        _reconciliation_service = OutputReconciliationService(
            lifecycle=get_process_lifecycle_service(),
            ledger=get_stock_ledger_service(),
            process_store=get_process_store(),
            output_store=get_output_store(),
            unit_of_work=get_unit_of_work(),
            weight_decimals=ledger_settings.weight_decimals,
            warn_on_clamp=ledger_settings.warn_on_clamp,
        )
    return _reconciliation_service


def get_reporting_service() -> ReportingService:
    """Get or create the ReportingService."""
    global _reporting_service

    if _reporting_service is None:
        from src.infrastructure.storage.sqlite import (
            get_group_store,
            get_output_store,
            get_process_store,
            get_stock_store,
            get_unit_of_work,
        )

        _reporting_service = ReportingService(
            stock_store=get_stock_store(),
            process_store=get_process_store(),
            output_store=get_output_store(),
            group_store=get_group_store(),
            unit_of_work=get_unit_of_work(),
            weight_decimals=get_settings().ledger.weight_decimals,
        )
    return _reporting_service


def get_snapshot_service() -> SnapshotService:
    """Get or create the SnapshotService."""
    global _snapshot_service

    if _snapshot_service is None:
        from src.infrastructure.storage.sqlite import get_snapshot_store, get_unit_of_work

        _snapshot_service = SnapshotService(
            snapshot_store=get_snapshot_store(),
            unit_of_work=get_unit_of_work(),
        )
    return _snapshot_service


def reset_services() -> None:
    """Reset all service singletons (for testing)."""
    global _stock_ledger_service, _process_lifecycle_service
    global _reconciliation_service, _reporting_service, _snapshot_service
    _stock_ledger_service = None
    _process_lifecycle_service = None
    _reconciliation_service = None
    _reporting_service = None
    _snapshot_service = None
