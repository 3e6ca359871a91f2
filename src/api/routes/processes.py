"""Process endpoints: create, inspect, reconcile and finalize."""

from fastapi import APIRouter, Depends, status

from src.api.dependencies import (
    get_finalize_process_use_case,
    get_lifecycle,
    get_reconciliation,
    get_start_process_use_case,
)
from src.application.dto.requests import CreateProcessRequest, FinalizeProcessRequest
from src.application.dto.responses import (
    ErrorResponse,
    FinalizeProcessResponse,
    ProcessListResponse,
)
from src.application.use_cases.finalize_process import FinalizeProcessUseCase
from src.application.use_cases.start_process import StartProcessUseCase
from src.core.entities.output import ProcessOutputs, Reconciliation
from src.core.entities.process import Process, ProcessStatus
from src.core.services import OutputReconciliationService, ProcessLifecycleService

router = APIRouter(prefix="/api/processes", tags=["processes"])


@router.post(
    "",
    response_model=Process,
    response_model_by_alias=False,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def create_process(
    request: CreateProcessRequest,
    use_case: StartProcessUseCase = Depends(get_start_process_use_case),
) -> Process:
    """Start a process; its weight is withdrawn from stock immediately."""
    return await use_case.execute(request)


@router.get(
    "",
    response_model=ProcessListResponse,
    response_model_by_alias=False,
)
async def list_processes(
    status: ProcessStatus | None = None,
    lifecycle: ProcessLifecycleService = Depends(get_lifecycle),
) -> ProcessListResponse:
    """List processes in creation order."""
    processes = await lifecycle.list_processes(status)
    return ProcessListResponse(processes=processes, total=len(processes))


@router.get(
    "/{process_id}",
    response_model=Process,
    response_model_by_alias=False,
    responses={404: {"model": ErrorResponse}},
)
async def get_process(
    process_id: str,
    lifecycle: ProcessLifecycleService = Depends(get_lifecycle),
) -> Process:
    """Get a process by internal or human-readable id."""
    return await lifecycle.get_process(process_id)


@router.get(
    "/{process_id}/defaults",
    response_model=ProcessOutputs,
    response_model_by_alias=False,
    responses={404: {"model": ErrorResponse}},
)
async def default_outputs(
    process_id: str,
    lifecycle: ProcessLifecycleService = Depends(get_lifecycle),
    reconciliation: OutputReconciliationService = Depends(get_reconciliation),
) -> ProcessOutputs:
    """Output prefill derived from the process plan."""
    process = await lifecycle.get_process(process_id)
    return reconciliation.default_outputs(process)


@router.post(
    "/{process_id}/reconcile",
    response_model=Reconciliation,
    response_model_by_alias=False,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def reconcile(
    process_id: str,
    outputs: ProcessOutputs,
    reconciliation: OutputReconciliationService = Depends(get_reconciliation),
) -> Reconciliation:
    """Preview the mass balance for some outputs without recording anything."""
    return await reconciliation.preview(process_id, outputs)


@router.post(
    "/{process_id}/finalize",
    response_model=FinalizeProcessResponse,
    response_model_by_alias=False,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def finalize_process(
    process_id: str,
    request: FinalizeProcessRequest,
    use_case: FinalizeProcessUseCase = Depends(get_finalize_process_use_case),
) -> FinalizeProcessResponse:
    """Record outputs, summary and leftover, and complete the process."""
    result = await use_case.execute(process_id, request)
    return use_case.to_response(result)
