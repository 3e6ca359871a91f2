"""Fixed report row schemas, one per report kind."""

from datetime import datetime
from enum import Enum

from src.core.entities.base import LedgerModel
from src.core.entities.process import ProcessStatus


class ReportKind(str, Enum):
    """Available report kinds."""

    PROCESS_DETAILS = "process-details"
    FINISHED_GOODS = "finished-goods"
    NON_CONFORMING = "non-conforming"
    REJECTED = "rejected"
    WEIGHT_LOSS = "weight-loss"


class ProcessDetailRow(LedgerModel):
    """A process joined with its outputs, summary and derived metrics."""

    id: str
    process_id: str
    process_name: str
    diameter: float
    weight_used: float
    blade_diameter: float
    number_of_rods: int
    status: ProcessStatus
    created_at: datetime
    finished_goods_count: int = 0
    finished_goods_weight: float = 0.0
    non_conforming_count: int = 0
    non_conforming_weight: float = 0.0
    rejected_count: int = 0
    rejected_weight: float = 0.0
    total_weight_loss: float = 0.0
    remaining_weight: float = 0.0
    added_back_to_stock: bool = False
    efficiency: float = 0.0  # % of weight used that became finished goods
    waste_percentage: float = 0.0  # % of weight used lost or rejected


class FinishedGoodRow(LedgerModel):
    process_id: str
    process_name: str
    count: int
    height: float | None = None
    weight_per_item: float
    weight: float
    created_at: datetime


class NonConformingRow(LedgerModel):
    process_id: str
    process_name: str
    count: int
    height: float | None = None
    weight_per_item: float
    weight: float
    include_in_report: bool
    created_at: datetime


class RejectedRow(LedgerModel):
    process_id: str
    process_name: str
    count: int
    weight_per_item: float
    weight: float
    reason: str
    include_in_report: bool
    created_at: datetime


class WeightLossRow(LedgerModel):
    process_id: str
    process_name: str
    weight: float
    weight_loss_per_rod: float
    created_at: datetime


ReportRow = ProcessDetailRow | FinishedGoodRow | NonConformingRow | RejectedRow | WeightLossRow

REPORT_ROW_MODELS: dict[ReportKind, type[LedgerModel]] = {
    ReportKind.PROCESS_DETAILS: ProcessDetailRow,
    ReportKind.FINISHED_GOODS: FinishedGoodRow,
    ReportKind.NON_CONFORMING: NonConformingRow,
    ReportKind.REJECTED: RejectedRow,
    ReportKind.WEIGHT_LOSS: WeightLossRow,
}

# Named field list per report kind, in column order
REPORT_FIELDS: dict[ReportKind, tuple[str, ...]] = {
    kind: tuple(model.model_fields) for kind, model in REPORT_ROW_MODELS.items()
}
