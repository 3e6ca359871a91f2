"""Snapshot export and import endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from src.api.dependencies import (
    get_export_snapshot_use_case,
    get_import_snapshot_use_case,
)
from src.application.dto.responses import ErrorResponse, ImportResponse
from src.application.use_cases.transfer_snapshot import (
    ExportSnapshotUseCase,
    ImportSnapshotUseCase,
)

router = APIRouter(prefix="/api/data", tags=["data"])


@router.get("/export")
async def export_snapshot(
    use_case: ExportSnapshotUseCase = Depends(get_export_snapshot_use_case),
) -> dict[str, Any]:
    """Every collection as one camelCase JSON document."""
    return await use_case.execute()


@router.post(
    "/import",
    response_model=ImportResponse,
    responses={422: {"model": ErrorResponse}},
)
async def import_snapshot(
    document: Any = Body(...),
    use_case: ImportSnapshotUseCase = Depends(get_import_snapshot_use_case),
) -> ImportResponse:
    """
    Replace each collection present in the document.

    Collections absent from the document are left untouched. The whole
    import is rejected if any record fails validation.
    """
    replaced = await use_case.execute(document)
    return ImportResponse(replaced=replaced)
