"""Fixtures for API tests: the app with its services replaced by mocks."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from src.api import dependencies as deps
from src.api.main import app
from src.application.use_cases import (
    ExportSnapshotUseCase,
    FinalizeProcessUseCase,
    ImportSnapshotUseCase,
    IssueStockUseCase,
    ReceiveStockUseCase,
    StartProcessUseCase,
)
from src.core.entities import Process


@pytest.fixture
def mock_ledger():
    return AsyncMock()


@pytest.fixture
def mock_lifecycle():
    return AsyncMock()


@pytest.fixture
def mock_reconciliation():
    service = AsyncMock()
    # default_outputs is synchronous
    service.default_outputs = MagicMock()
    return service


@pytest.fixture
def mock_reporting():
    return AsyncMock()


@pytest.fixture
def mock_snapshot():
    return AsyncMock()


@pytest.fixture
def sample_process() -> Process:
    return Process(
        name="Batch 42 cut",
        process_id="PROC-TEST-00001",
        diameter=12.0,
        weight_used=12.0,
        blade_diameter=300.0,
        number_of_rods=8,
        length_per_rod=100.0,
        weight_per_rod=1.0,
        wastage_per_rod=0.125,
    )


@pytest.fixture
async def client(
    mock_ledger, mock_lifecycle, mock_reconciliation, mock_reporting, mock_snapshot
):
    overrides = {
        deps.get_ledger: lambda: mock_ledger,
        deps.get_lifecycle: lambda: mock_lifecycle,
        deps.get_reconciliation: lambda: mock_reconciliation,
        deps.get_reporting: lambda: mock_reporting,
        deps.get_receive_stock_use_case: lambda: ReceiveStockUseCase(mock_ledger),
        deps.get_issue_stock_use_case: lambda: IssueStockUseCase(mock_ledger),
        deps.get_start_process_use_case: lambda: StartProcessUseCase(mock_lifecycle),
        deps.get_finalize_process_use_case: lambda: FinalizeProcessUseCase(mock_reconciliation),
        deps.get_export_snapshot_use_case: lambda: ExportSnapshotUseCase(mock_snapshot),
        deps.get_import_snapshot_use_case: lambda: ImportSnapshotUseCase(mock_snapshot),
    }
    app.dependency_overrides.update(overrides)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    for dependency in overrides:
        app.dependency_overrides.pop(dependency, None)
