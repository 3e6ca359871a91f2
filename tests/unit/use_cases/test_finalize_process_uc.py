"""Tests for FinalizeProcessUseCase."""

from unittest.mock import AsyncMock

import pytest

from src.application.dto.requests import FinalizeProcessRequest
from src.application.use_cases.finalize_process import FinalizeProcessUseCase
from src.core.entities import Process, ProcessSummary, Reconciliation
from src.core.exceptions import InvalidStateError
from src.core.services.reconciliation import FinalizeResult


@pytest.fixture
def completed_process() -> Process:
    return Process(
        name="Batch 42 cut",
        process_id="PROC-TEST-00001",
        diameter=12.0,
        weight_used=12.0,
        blade_diameter=300.0,
        number_of_rods=8,
        length_per_rod=100.0,
        weight_per_rod=1.0,
        status="completed",
    )


@pytest.fixture
def mock_reconciliation():
    return AsyncMock()


@pytest.fixture
def use_case(mock_reconciliation):
    return FinalizeProcessUseCase(reconciliation=mock_reconciliation)


class TestFinalizeProcessUseCase:
    async def test_forwards_outputs(self, use_case, mock_reconciliation, completed_process):
        mock_reconciliation.finalize.return_value = FinalizeResult(
            process=completed_process,
            summary=ProcessSummary(
                process_id=completed_process.id,
                total_weight_used=12.0,
                total_weight_loss=1.0,
                remaining_weight=3.0,
            ),
            reconciliation=Reconciliation(weight_used=12.0, leftover_weight=3.0),
        )
        request = FinalizeProcessRequest.model_validate(
            {
                "outputs": {"finished_goods": {"count": 8, "weight_per_item": 1.0}},
                "add_leftover_to_stock": True,
            }
        )

        result = await use_case.execute(completed_process.id, request)

        call = mock_reconciliation.finalize.await_args
        assert call.args[0] == completed_process.id
        assert call.args[1].finished_goods.count == 8
        assert call.kwargs == {"add_leftover_to_stock": True}

        response = use_case.to_response(result)
        assert response.summary.remaining_weight == 3.0
        assert response.available_after is None

    async def test_already_completed(self, use_case, mock_reconciliation):
        mock_reconciliation.finalize.side_effect = InvalidStateError(
            "p1", "completed", "in_progress"
        )
        with pytest.raises(InvalidStateError):
            await use_case.execute("p1", FinalizeProcessRequest())
