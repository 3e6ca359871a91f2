"""Finalize Process Use Case: record outputs and complete a process."""

from src.application.dto.requests import FinalizeProcessRequest
from src.application.dto.responses import FinalizeProcessResponse
from src.config import get_logger
from src.core.services.reconciliation import FinalizeResult, OutputReconciliationService

logger = get_logger(__name__)


class FinalizeProcessUseCase:
    """Finalize an in-progress process atomically."""

    def __init__(self, reconciliation: OutputReconciliationService | None = None):
        self._reconciliation = reconciliation

    def _get_reconciliation(self) -> OutputReconciliationService:
        if self._reconciliation is None:
            from src.application.services import get_reconciliation_service

            self._reconciliation = get_reconciliation_service()
        return self._reconciliation

    async def execute(self, process_id: str, request: FinalizeProcessRequest) -> FinalizeResult:
        """Execute finalize process use case."""
        logger.info(
            "finalize_process_started",
            process_id=process_id,
            add_leftover_to_stock=request.add_leftover_to_stock,
        )
        return await self._get_reconciliation().finalize(
            process_id,
            request.outputs,
            add_leftover_to_stock=request.add_leftover_to_stock,
        )

    def to_response(self, result: FinalizeResult) -> FinalizeProcessResponse:
        """Convert result to API response."""
        return FinalizeProcessResponse(
            process=result.process,
            summary=result.summary,
            reconciliation=result.reconciliation,
            finished_good=result.finished_good,
            non_conforming=result.non_conforming,
            rejected=result.rejected,
            weight_loss=result.weight_loss,
            leftover=result.leftover,
            available_after=result.deposit.available if result.deposit else None,
        )
