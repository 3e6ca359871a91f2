"""
Application layer - Use cases, DTOs, and service factories.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services
3. Providing factory functions for dependency injection

Use cases are the only entry point for API handlers that write.
"""

from src.application.dto.requests import (
    CreateGroupRequest,
    CreateProcessRequest,
    DepositRequest,
    FinalizeProcessRequest,
    UpdateGroupRequest,
    WithdrawRequest,
)
from src.application.dto.responses import (
    DepositResponse,
    ErrorResponse,
    FinalizeProcessResponse,
    HealthResponse,
    WithdrawResponse,
)
from src.application.services import (
    get_process_lifecycle_service,
    get_reconciliation_service,
    get_reporting_service,
    get_snapshot_service,
    get_stock_ledger_service,
    reset_services,
)
from src.application.use_cases import (
    ExportSnapshotUseCase,
    FinalizeProcessUseCase,
    ImportSnapshotUseCase,
    IssueStockUseCase,
    ReceiveStockUseCase,
    StartProcessUseCase,
)

__all__ = [
    # Request DTOs
    "DepositRequest",
    "WithdrawRequest",
    "CreateProcessRequest",
    "FinalizeProcessRequest",
    "CreateGroupRequest",
    "UpdateGroupRequest",
    # Response DTOs
    "DepositResponse",
    "WithdrawResponse",
    "FinalizeProcessResponse",
    "HealthResponse",
    "ErrorResponse",
    # Use Cases
    "ReceiveStockUseCase",
    "IssueStockUseCase",
    "StartProcessUseCase",
    "FinalizeProcessUseCase",
    "ExportSnapshotUseCase",
    "ImportSnapshotUseCase",
    # Service factories
    "get_stock_ledger_service",
    "get_process_lifecycle_service",
    "get_reconciliation_service",
    "get_reporting_service",
    "get_snapshot_service",
    "reset_services",
]
