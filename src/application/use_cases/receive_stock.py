"""Receive Stock Use Case: deposit a batch of rods."""

from src.application.dto.requests import DepositRequest
from src.application.dto.responses import DepositResponse
from src.config import get_logger
from src.core.services.stock_ledger import DepositResult, StockLedgerService
from src.core.units import to_mm

logger = get_logger(__name__)


class ReceiveStockUseCase:
    """Deposit rods into stock and register their diameter."""

    def __init__(self, ledger: StockLedgerService | None = None):
        self._ledger = ledger

    def _get_ledger(self) -> StockLedgerService:
        if self._ledger is None:
            from src.application.services import get_stock_ledger_service

            self._ledger = get_stock_ledger_service()
        return self._ledger

    async def execute(self, request: DepositRequest) -> DepositResult:
        """Execute receive stock use case."""
        logger.info(
            "receive_stock_started",
            diameter=request.diameter,
            weight=request.weight,
        )
        length = None
        if request.length is not None:
            length = to_mm(request.length, request.length_unit)

        return await self._get_ledger().deposit(request.diameter, request.weight, length)

    def to_response(self, result: DepositResult) -> DepositResponse:
        """Convert result to API response."""
        return DepositResponse(
            entry=result.entry,
            transaction=result.transaction,
            available=result.available,
            diameter_registered=result.diameter_registered,
        )
