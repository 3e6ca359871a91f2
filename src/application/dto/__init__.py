"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses.

These are the ONLY contracts between API handlers and use cases.
"""

from src.application.dto.requests import (
    CreateGroupRequest,
    CreateProcessRequest,
    DepositRequest,
    FinalizeProcessRequest,
    RegisterDiameterRequest,
    UpdateGroupRequest,
    WithdrawRequest,
)
from src.application.dto.responses import (
    AvailableWeightResponse,
    DepositResponse,
    DiameterListResponse,
    EntryConsumptionResponse,
    ErrorResponse,
    FinalizeProcessResponse,
    GroupListResponse,
    HealthResponse,
    ProviderHealthResponse,
    HistoryResponse,
    ImportResponse,
    InventoryStatsResponse,
    ProcessListResponse,
    RegisterDiameterResponse,
    ReportResponse,
    WithdrawResponse,
)

__all__ = [
    # Requests
    "DepositRequest",
    "WithdrawRequest",
    "RegisterDiameterRequest",
    "CreateProcessRequest",
    "FinalizeProcessRequest",
    "CreateGroupRequest",
    "UpdateGroupRequest",
    # Responses
    "DepositResponse",
    "WithdrawResponse",
    "EntryConsumptionResponse",
    "AvailableWeightResponse",
    "DiameterListResponse",
    "RegisterDiameterResponse",
    "InventoryStatsResponse",
    "HistoryResponse",
    "ProcessListResponse",
    "FinalizeProcessResponse",
    "ReportResponse",
    "GroupListResponse",
    "ImportResponse",
    "HealthResponse",
    "ProviderHealthResponse",
    "ErrorResponse",
]
