"""Pytest configuration for unit service tests.

Services are exercised against AsyncMock stores; nothing here touches SQLite.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock

import pytest

from src.core.entities import Process
from src.core.interfaces.unit_of_work import IUnitOfWork
from src.core.services import (
    OutputReconciliationService,
    ProcessLifecycleService,
    StockLedgerService,
)


class RecordingUnitOfWork(IUnitOfWork):
    """Unit of work that only counts the scopes it opens."""

    def __init__(self):
        self.opened = 0
        self.failed = 0

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        self.opened += 1
        try:
            yield
        except BaseException:
            self.failed += 1
            raise


@pytest.fixture
def uow() -> RecordingUnitOfWork:
    return RecordingUnitOfWork()


@pytest.fixture
def stock_store():
    store = AsyncMock()
    store.add_entry.side_effect = lambda entry: entry
    store.add_transaction.side_effect = lambda line: line
    store.add_diameter.return_value = True
    store.add_blade_diameter.return_value = True
    store.list_entries.return_value = []
    store.total_weight.return_value = 0.0
    return store


@pytest.fixture
def process_store():
    store = AsyncMock()
    store.get_process.return_value = None
    store.get_by_process_code.return_value = None
    store.create_process.side_effect = lambda process: process
    store.mark_completed.return_value = True
    return store


@pytest.fixture
def output_store():
    store = AsyncMock()
    for method in (
        "add_finished_good",
        "add_non_conforming",
        "add_rejected",
        "add_weight_loss",
        "add_leftover",
        "add_summary",
    ):
        getattr(store, method).side_effect = lambda record: record
    return store


@pytest.fixture
def ledger(stock_store, uow) -> StockLedgerService:
    return StockLedgerService(stock_store, uow)


@pytest.fixture
def lifecycle(ledger, process_store, output_store, uow) -> ProcessLifecycleService:
    return ProcessLifecycleService(ledger, process_store, output_store, uow)


@pytest.fixture
def reconciliation(lifecycle, ledger, process_store, output_store, uow):
    return OutputReconciliationService(lifecycle, ledger, process_store, output_store, uow)


@pytest.fixture
def process() -> Process:
    """In-progress process that reserved 12 kg of 12 mm rod for 8 rods."""
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
