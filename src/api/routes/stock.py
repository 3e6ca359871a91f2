"""Rod stock endpoints: deposits, withdrawals, known sizes and history."""

from fastapi import APIRouter, Depends, Query, status

from src.api.dependencies import (
    get_issue_stock_use_case,
    get_ledger,
    get_receive_stock_use_case,
)
from src.application.dto.requests import (
    DepositRequest,
    RegisterDiameterRequest,
    WithdrawRequest,
)
from src.application.dto.responses import (
    AvailableWeightResponse,
    DepositResponse,
    DiameterListResponse,
    ErrorResponse,
    HistoryResponse,
    InventoryStatsResponse,
    RegisterDiameterResponse,
    WithdrawResponse,
)
from src.application.use_cases.issue_stock import IssueStockUseCase
from src.application.use_cases.receive_stock import ReceiveStockUseCase
from src.core.entities.stock import RodStockEntry
from src.core.services import StockLedgerService

router = APIRouter(prefix="/api/stock", tags=["stock"])


@router.post(
    "/deposit",
    response_model=DepositResponse,
    response_model_by_alias=False,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def deposit(
    request: DepositRequest,
    use_case: ReceiveStockUseCase = Depends(get_receive_stock_use_case),
) -> DepositResponse:
    """Add a batch of rods to stock."""
    result = await use_case.execute(request)
    return use_case.to_response(result)


@router.post(
    "/withdraw",
    response_model=WithdrawResponse,
    response_model_by_alias=False,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def withdraw(
    request: WithdrawRequest,
    use_case: IssueStockUseCase = Depends(get_issue_stock_use_case),
) -> WithdrawResponse:
    """Withdraw weight of one diameter, oldest entries first."""
    result = await use_case.execute(request)
    return use_case.to_response(result)


@router.get(
    "/entries",
    response_model=list[RodStockEntry],
    response_model_by_alias=False,
)
async def list_entries(
    diameter: float | None = None,
    ledger: StockLedgerService = Depends(get_ledger),
) -> list[RodStockEntry]:
    """List stock entries in insertion order."""
    return await ledger.list_entries(diameter)


@router.get("/available/{diameter}", response_model=AvailableWeightResponse)
async def available_weight(
    diameter: float,
    ledger: StockLedgerService = Depends(get_ledger),
) -> AvailableWeightResponse:
    """Total weight available for a diameter."""
    return AvailableWeightResponse(
        diameter=diameter,
        weight=await ledger.available_weight(diameter),
    )


@router.get(
    "/stats",
    response_model=InventoryStatsResponse,
    response_model_by_alias=False,
)
async def inventory_stats(
    ledger: StockLedgerService = Depends(get_ledger),
) -> InventoryStatsResponse:
    """Totals with a per-diameter breakdown."""
    stats = await ledger.inventory_stats()
    return InventoryStatsResponse(
        total_entries=stats.total_entries,
        total_weight=stats.total_weight,
        by_diameter=stats.by_diameter,
    )


@router.get(
    "/history",
    response_model=HistoryResponse,
    response_model_by_alias=False,
)
async def history(
    newest_first: bool = False,
    process_id: str | None = None,
    limit: int | None = Query(default=None, ge=1),
    ledger: StockLedgerService = Depends(get_ledger),
) -> HistoryResponse:
    """Inventory ledger lines, oldest first by default."""
    transactions = await ledger.history(
        newest_first=newest_first,
        process_id=process_id,
        limit=limit,
    )
    return HistoryResponse(transactions=transactions, total=len(transactions))


@router.get("/diameters", response_model=DiameterListResponse)
async def list_diameters(
    ledger: StockLedgerService = Depends(get_ledger),
) -> DiameterListResponse:
    """Known rod diameters."""
    return DiameterListResponse(diameters=await ledger.list_diameters())


@router.post(
    "/diameters",
    response_model=RegisterDiameterResponse,
    responses={400: {"model": ErrorResponse}},
)
async def register_diameter(
    request: RegisterDiameterRequest,
    ledger: StockLedgerService = Depends(get_ledger),
) -> RegisterDiameterResponse:
    """Add a rod diameter to the known set."""
    added = await ledger.register_diameter(request.diameter)
    return RegisterDiameterResponse(diameter=request.diameter, added=added)


@router.get("/blade-diameters", response_model=DiameterListResponse)
async def list_blade_diameters(
    ledger: StockLedgerService = Depends(get_ledger),
) -> DiameterListResponse:
    """Known blade diameters."""
    return DiameterListResponse(diameters=await ledger.list_blade_diameters())


@router.post(
    "/blade-diameters",
    response_model=RegisterDiameterResponse,
    responses={400: {"model": ErrorResponse}},
)
async def register_blade_diameter(
    request: RegisterDiameterRequest,
    ledger: StockLedgerService = Depends(get_ledger),
) -> RegisterDiameterResponse:
    """Add a blade diameter to the known set."""
    added = await ledger.register_blade_diameter(request.diameter)
    return RegisterDiameterResponse(diameter=request.diameter, added=added)
