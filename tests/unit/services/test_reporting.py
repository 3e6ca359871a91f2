"""Tests for ReportingService."""

from unittest.mock import AsyncMock

import pytest

from src.core.entities import (
    FinishedGood,
    ProcessGroup,
    ProcessSummary,
    RejectedItem,
    ReportKind,
    WeightLossItem,
)
from src.core.exceptions import ProcessGroupNotFoundError, ValidationError
from src.core.services import ReportingService, percentage


@pytest.fixture
def group_store():
    store = AsyncMock()
    store.get_group.return_value = None
    store.create_group.side_effect = lambda group: group
    store.update_group.return_value = True
    store.delete_group.return_value = True
    store.list_groups.return_value = []
    return store


@pytest.fixture
def reporting(stock_store, process_store, output_store, group_store, uow):
    return ReportingService(stock_store, process_store, output_store, group_store, uow)


@pytest.fixture
def finished_process(process, process_store, output_store):
    """The fixture process with 8 kg finished, 0.5 kg rejected and 1 kg loss recorded."""
    process_store.list_processes.return_value = [process]
    process_store.get_process.side_effect = lambda ref: process if ref == process.id else None
    output_store.list_finished_goods.return_value = [
        FinishedGood(process_id=process.id, count=8, weight_per_item=1.0, weight=8.0)
    ]
    output_store.list_non_conforming.return_value = []
    output_store.list_rejected.return_value = [
        RejectedItem(process_id=process.id, count=1, weight_per_item=0.5, weight=0.5, reason="crack")
    ]
    output_store.list_weight_loss.return_value = [
        WeightLossItem(process_id=process.id, weight=1.0, weight_loss_per_rod=0.125)
    ]
    output_store.list_summaries.return_value = [
        ProcessSummary(
            process_id=process.id,
            total_weight_used=12.0,
            total_weight_loss=1.0,
            remaining_weight=2.5,
        )
    ]
    return process


class TestPercentage:
    def test_basic(self):
        assert percentage(8.0, 12.0) == 66.67

    def test_zero_whole(self):
        assert percentage(5.0, 0.0) == 0.0

    def test_full(self):
        assert percentage(12.0, 12.0) == 100.0


class TestStatsByDiameter:
    async def test_rounds_weights(self, reporting, stock_store):
        stock_store.weight_by_diameter.return_value = [(12.0, 0.1 + 0.2, 2)]
        stats = await reporting.stats_by_diameter()
        assert stats[0].weight == 0.3
        assert stats[0].entries == 2


class TestProcessDetails:
    async def test_joins_outputs_and_metrics(self, reporting, finished_process):
        rows = await reporting.process_details()

        assert len(rows) == 1
        row = rows[0]
        assert row.process_id == finished_process.process_id
        assert row.finished_goods_count == 8
        assert row.finished_goods_weight == 8.0
        assert row.rejected_weight == 0.5
        assert row.total_weight_loss == 1.0
        assert row.remaining_weight == 2.5
        assert row.efficiency == 66.67
        assert row.waste_percentage == 12.5

    async def test_without_summary(self, reporting, finished_process, output_store):
        output_store.list_summaries.return_value = []
        rows = await reporting.process_details()
        assert rows[0].remaining_weight == 0.0
        assert rows[0].added_back_to_stock is False


class TestReport:
    async def test_finished_goods_rows_carry_process_name(self, reporting, finished_process):
        rows = await reporting.report(ReportKind.FINISHED_GOODS)
        assert rows[0].process_name == "Batch 42 cut"
        assert rows[0].weight == 8.0

    async def test_process_filter_resolves_code(
        self, reporting, finished_process, process_store, output_store
    ):
        process_store.get_by_process_code.return_value = finished_process

        await reporting.report(ReportKind.REJECTED, process_id=finished_process.process_id)

        output_store.list_rejected.assert_awaited_once_with([finished_process.id])

    async def test_process_filter_beats_group(
        self, reporting, finished_process, group_store, output_store
    ):
        await reporting.report(
            ReportKind.WEIGHT_LOSS, process_id=finished_process.id, group_id="unknown"
        )
        group_store.get_group.assert_not_awaited()
        output_store.list_weight_loss.assert_awaited_once_with([finished_process.id])

    async def test_group_filter(self, reporting, finished_process, group_store, output_store):
        group_store.get_group.return_value = ProcessGroup(
            id="g-1", name="Week 1", process_ids=[finished_process.id]
        )

        await reporting.report(ReportKind.FINISHED_GOODS, group_id="g-1")

        output_store.list_finished_goods.assert_awaited_once_with([finished_process.id])

    async def test_unknown_group(self, reporting, finished_process):
        with pytest.raises(ProcessGroupNotFoundError):
            await reporting.report(ReportKind.FINISHED_GOODS, group_id="missing")

    async def test_no_filter_is_all(self, reporting, finished_process, output_store):
        await reporting.report(ReportKind.NON_CONFORMING)
        output_store.list_non_conforming.assert_awaited_once_with(None)


class TestGroups:
    async def test_create_resolves_members(self, reporting, finished_process, process_store):
        process_store.get_by_process_code.side_effect = (
            lambda ref: finished_process if ref == finished_process.process_id else None
        )

        group = await reporting.create_group(
            " Week 1 ", [finished_process.process_id, finished_process.id]
        )

        assert group.name == "Week 1"
        assert group.process_ids == [finished_process.id]

    async def test_create_rejects_unknown_member(self, reporting, group_store):
        with pytest.raises(ValidationError):
            await reporting.create_group("Week 1", ["nope"])
        group_store.create_group.assert_not_awaited()

    async def test_create_rejects_empty(self, reporting):
        with pytest.raises(ValidationError):
            await reporting.create_group("Week 1", [])

    async def test_create_rejects_blank_name(self, reporting, finished_process):
        with pytest.raises(ValidationError):
            await reporting.create_group("  ", [finished_process.id])

    async def test_get_missing(self, reporting):
        with pytest.raises(ProcessGroupNotFoundError):
            await reporting.get_group("missing")

    async def test_update_rename_only(self, reporting, group_store, finished_process):
        group_store.get_group.return_value = ProcessGroup(
            id="g-1", name="Old", process_ids=[finished_process.id]
        )

        group = await reporting.update_group("g-1", name="New")

        assert group.name == "New"
        assert group.process_ids == [finished_process.id]
        group_store.update_group.assert_awaited_once()

    async def test_delete_missing(self, reporting, group_store):
        group_store.delete_group.return_value = False
        with pytest.raises(ProcessGroupNotFoundError):
            await reporting.delete_group("missing")
