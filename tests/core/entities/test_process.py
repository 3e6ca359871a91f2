"""Tests for process and output entities."""

from src.core.entities import (
    FinishedGood,
    Process,
    ProcessOutputs,
    ProcessStatus,
    ProcessSummary,
    RejectedInput,
)
from src.core.units import LengthUnit, MassUnit


def _process(**overrides) -> Process:
    data = {
        "name": "Batch",
        "process_id": "PROC-1",
        "diameter": 12.0,
        "weight_used": 12.0,
        "blade_diameter": 300.0,
        "number_of_rods": 8,
        "length_per_rod": 100.0,
        "weight_per_rod": 1.0,
    }
    data.update(overrides)
    return Process(**data)


class TestProcess:
    def test_defaults(self):
        process = _process()
        assert process.status == ProcessStatus.IN_PROGRESS
        assert process.is_in_progress
        assert process.completed_at is None
        assert process.length_unit == LengthUnit.MM
        assert process.wastage_unit == MassUnit.G

    def test_completed_is_not_in_progress(self):
        assert not _process(status=ProcessStatus.COMPLETED).is_in_progress

    def test_status_values(self):
        assert ProcessStatus("in-progress") == ProcessStatus.IN_PROGRESS
        assert ProcessStatus("completed") == ProcessStatus.COMPLETED

    def test_snapshot_keys(self):
        data = _process().model_dump(mode="json", by_alias=True)
        assert data["processId"] == "PROC-1"
        assert data["weightUsed"] == 12.0
        assert data["status"] == "in-progress"


class TestOutputs:
    def test_count_accepts_number_alias(self):
        good = FinishedGood.model_validate(
            {"processId": "p", "number": 4, "weightPerItem": 1.0, "weight": 4.0}
        )
        assert good.count == 4

    def test_summary_accepts_legacy_flag_name(self):
        summary = ProcessSummary.model_validate(
            {
                "processId": "p",
                "totalWeightUsed": 12,
                "totalWeightLoss": 1,
                "remainingWeight": 3,
                "addRemainingToStock": True,
            }
        )
        assert summary.added_back_to_stock is True

    def test_outputs_all_optional(self):
        outputs = ProcessOutputs()
        assert outputs.finished_goods is None
        assert outputs.weight_loss_override is None

    def test_rejected_defaults(self):
        line = RejectedInput(count=2, weight_per_item=0.5)
        assert line.reason == ""
        assert line.include_in_report is False
