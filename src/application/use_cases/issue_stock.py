"""Issue Stock Use Case: manual withdrawal with balance check."""

from src.application.dto.requests import WithdrawRequest
from src.application.dto.responses import EntryConsumptionResponse, WithdrawResponse
from src.config import get_logger
from src.core.services.stock_ledger import StockLedgerService, WithdrawalResult

logger = get_logger(__name__)


class IssueStockUseCase:
    """Withdraw weight from stock; fails without side effects when short."""

    def __init__(self, ledger: StockLedgerService | None = None):
        self._ledger = ledger

    def _get_ledger(self) -> StockLedgerService:
        if self._ledger is None:
            from src.application.services import get_stock_ledger_service

            self._ledger = get_stock_ledger_service()
        return self._ledger

    async def execute(self, request: WithdrawRequest) -> WithdrawalResult:
        """Execute issue stock use case."""
        logger.info(
            "issue_stock_started",
            diameter=request.diameter,
            amount=request.amount,
        )
        return await self._get_ledger().withdraw(
            request.diameter,
            request.amount,
            process_id=request.process_id,
            process_name=request.process_name,
        )

    def to_response(self, result: WithdrawalResult) -> WithdrawResponse:
        """Convert result to API response."""
        return WithdrawResponse(
            transaction=result.transaction,
            available=result.available,
            consumptions=[
                EntryConsumptionResponse(
                    entry_id=c.entry_id,
                    taken=c.taken,
                    remaining=c.remaining,
                )
                for c in result.consumptions
            ],
        )
