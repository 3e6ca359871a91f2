"""Process group endpoints."""

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_reporting
from src.application.dto.requests import CreateGroupRequest, UpdateGroupRequest
from src.application.dto.responses import ErrorResponse, GroupListResponse
from src.core.entities.group import ProcessGroup
from src.core.services import ReportingService

router = APIRouter(prefix="/api/groups", tags=["groups"])


@router.get("", response_model=GroupListResponse, response_model_by_alias=False)
async def list_groups(
    reporting: ReportingService = Depends(get_reporting),
) -> GroupListResponse:
    groups = await reporting.list_groups()
    return GroupListResponse(groups=groups, total=len(groups))


@router.post(
    "",
    response_model=ProcessGroup,
    response_model_by_alias=False,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_group(
    request: CreateGroupRequest,
    reporting: ReportingService = Depends(get_reporting),
) -> ProcessGroup:
    """Create a named set of existing processes."""
    return await reporting.create_group(request.name, request.process_ids)


@router.get(
    "/{group_id}",
    response_model=ProcessGroup,
    response_model_by_alias=False,
    responses={404: {"model": ErrorResponse}},
)
async def get_group(
    group_id: str,
    reporting: ReportingService = Depends(get_reporting),
) -> ProcessGroup:
    return await reporting.get_group(group_id)


@router.patch(
    "/{group_id}",
    response_model=ProcessGroup,
    response_model_by_alias=False,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def update_group(
    group_id: str,
    request: UpdateGroupRequest,
    reporting: ReportingService = Depends(get_reporting),
) -> ProcessGroup:
    """Rename a group or replace its members."""
    return await reporting.update_group(
        group_id,
        name=request.name,
        process_ids=request.process_ids,
    )


@router.delete(
    "/{group_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_group(
    group_id: str,
    reporting: ReportingService = Depends(get_reporting),
) -> None:
    await reporting.delete_group(group_id)
