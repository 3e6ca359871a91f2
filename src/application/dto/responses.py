"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from src.core.entities.group import ProcessGroup
from src.core.entities.output import (
    FinishedGood,
    LeftoverMaterial,
    NonConformingItem,
    ProcessSummary,
    Reconciliation,
    RejectedItem,
    WeightLossItem,
)
from src.core.entities.process import Process
from src.core.entities.report import ReportKind, ReportRow
from src.core.entities.stock import (
    DiameterStock,
    InventoryTransaction,
    RodStockEntry,
)

# --- Stock ---


class DepositResponse(BaseModel):
    """Result of a deposit."""

    entry: RodStockEntry
    transaction: InventoryTransaction
    available: float = Field(..., description="Weight available for the diameter afterwards")
    diameter_registered: bool = False


class EntryConsumptionResponse(BaseModel):
    """Weight taken from one stock entry by a withdrawal."""

    entry_id: str
    taken: float
    remaining: float


class WithdrawResponse(BaseModel):
    """Result of a withdrawal."""

    transaction: InventoryTransaction
    available: float = Field(..., description="Weight available for the diameter afterwards")
    consumptions: list[EntryConsumptionResponse] = Field(default_factory=list)


class AvailableWeightResponse(BaseModel):
    diameter: float
    weight: float


class DiameterListResponse(BaseModel):
    diameters: list[float] = Field(default_factory=list)


class RegisterDiameterResponse(BaseModel):
    diameter: float
    added: bool = Field(..., description="False when the diameter was already known")


class InventoryStatsResponse(BaseModel):
    """Overall stock totals."""

    total_entries: int
    total_weight: float
    by_diameter: list[DiameterStock] = Field(default_factory=list)


class HistoryResponse(BaseModel):
    transactions: list[InventoryTransaction] = Field(default_factory=list)
    total: int = 0


# --- Processes ---


class ProcessListResponse(BaseModel):
    processes: list[Process] = Field(default_factory=list)
    total: int = 0


class FinalizeProcessResponse(BaseModel):
    """Everything written when a process was finalized."""

    process: Process
    summary: ProcessSummary
    reconciliation: Reconciliation
    finished_good: FinishedGood | None = None
    non_conforming: NonConformingItem | None = None
    rejected: RejectedItem | None = None
    weight_loss: WeightLossItem | None = None
    leftover: LeftoverMaterial | None = None
    available_after: float | None = Field(
        default=None,
        description="Stock available for the diameter after the leftover deposit",
    )


# --- Reports ---


class ReportResponse(BaseModel):
    """Rows of one report kind with its fixed column list."""

    kind: ReportKind
    fields: list[str]
    rows: list[ReportRow] = Field(default_factory=list)
    total: int = 0


class GroupListResponse(BaseModel):
    groups: list[ProcessGroup] = Field(default_factory=list)
    total: int = 0


# --- Data ---


class ImportResponse(BaseModel):
    """Record counts per replaced collection."""

    replaced: dict[str, int] = Field(default_factory=dict)


# --- Common ---


class ProviderHealthResponse(BaseModel):
    """Health status of a backing component."""

    name: str
    available: bool
    latency_ms: float | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    database: ProviderHealthResponse | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. INSUFFICIENT_STOCK)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    details: dict[str, Any] = Field(default_factory=dict, description="Structured error context")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
