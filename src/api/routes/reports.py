"""Report endpoints: per-diameter stock and fixed-schema process reports."""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_reporting
from src.application.dto.responses import ErrorResponse, ReportResponse
from src.core.entities.report import REPORT_FIELDS, ReportKind
from src.core.entities.stock import DiameterStock
from src.core.services import ReportingService

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get(
    "/diameters",
    response_model=list[DiameterStock],
    response_model_by_alias=False,
)
async def stats_by_diameter(
    reporting: ReportingService = Depends(get_reporting),
) -> list[DiameterStock]:
    """Available weight and entry count for every diameter in stock."""
    return await reporting.stats_by_diameter()


@router.get(
    "/{kind}",
    response_model=ReportResponse,
    response_model_by_alias=False,
    responses={404: {"model": ErrorResponse}},
)
async def report(
    kind: ReportKind,
    process_id: str | None = None,
    group_id: str | None = None,
    reporting: ReportingService = Depends(get_reporting),
) -> ReportResponse:
    """
    Report rows for one kind.

    process_id takes precedence over group_id; with neither, every process
    is included.
    """
    rows = await reporting.report(kind, process_id=process_id, group_id=group_id)
    return ReportResponse(
        kind=kind,
        fields=list(REPORT_FIELDS[kind]),
        rows=rows,
        total=len(rows),
    )
