"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from src.application.services import reset_services


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
def mock_settings(temp_db_path: Path):
    """Mock settings with temp database path."""
    mock = MagicMock()
    mock.storage.db_path = temp_db_path
    mock.storage.pool_size = 2
    mock.storage.busy_timeout = 5000
    mock.ledger.weight_decimals = 3
    mock.ledger.process_id_prefix = "PROC"
    mock.ledger.warn_on_clamp = True
    return mock


@pytest.fixture
async def ledger_db(mock_settings) -> AsyncGenerator[Path, None]:
    """
    Migrated temporary database wired as the global pool's target.

    Stores and the application service singletons all resolve to it for the
    duration of the test.
    """
    import src.application.services as services_module
    import src.infrastructure.storage.sqlite as sqlite_module
    import src.infrastructure.storage.sqlite.connection as conn_module
    from src.infrastructure.storage.sqlite.migrations import migrator

    db_path = mock_settings.storage.db_path
    conn_module._pool = None
    reset_services()

    with (
        patch.object(conn_module, "get_settings", return_value=mock_settings),
        patch.object(migrator, "get_settings", return_value=mock_settings),
        patch.object(services_module, "get_settings", return_value=mock_settings),
    ):
        await migrator.initialize_database(db_path, create_backup_before=False)
        try:
            yield db_path
        finally:
            await conn_module.close_pool()
            reset_services()
            for name in (
                "_stock_store",
                "_process_store",
                "_output_store",
                "_group_store",
                "_snapshot_store",
                "_unit_of_work",
            ):
                setattr(sqlite_module, name, None)


@pytest.fixture
def ledger_services(ledger_db: Path) -> SimpleNamespace:
    """Core services wired to the temporary database."""
    from src.application.services import (
        get_process_lifecycle_service,
        get_reconciliation_service,
        get_reporting_service,
        get_snapshot_service,
        get_stock_ledger_service,
    )

    return SimpleNamespace(
        ledger=get_stock_ledger_service(),
        lifecycle=get_process_lifecycle_service(),
        reconciliation=get_reconciliation_service(),
        reporting=get_reporting_service(),
        snapshot=get_snapshot_service(),
    )


@pytest.fixture
def process_request() -> dict:
    """Request body for a 12 kg process on 12 mm rods."""
    return {
        "name": "Batch 42 cut",
        "diameter": 12.0,
        "weight_used": 12.0,
        "blade_diameter": 300.0,
        "number_of_rods": 8,
        "length_per_rod": 100.0,
        "length_unit": "mm",
        "weight_per_rod": 1.0,
        "wastage_per_rod": 125.0,
        "wastage_unit": "g",
    }
