"""Core domain entities."""

from src.core.entities.base import LedgerModel, new_id
from src.core.entities.group import ProcessGroup
from src.core.entities.output import (
    FinishedGood,
    FinishedGoodsInput,
    LeftoverMaterial,
    NonConformingInput,
    NonConformingItem,
    ProcessOutputs,
    ProcessSummary,
    Reconciliation,
    RejectedInput,
    RejectedItem,
    WeightLossItem,
)
from src.core.entities.process import Process, ProcessSpec, ProcessStatus
from src.core.entities.report import (
    REPORT_FIELDS,
    REPORT_ROW_MODELS,
    FinishedGoodRow,
    NonConformingRow,
    ProcessDetailRow,
    RejectedRow,
    ReportKind,
    ReportRow,
    WeightLossRow,
)
from src.core.entities.snapshot import (
    COLLECTION_MODELS,
    CollectionKind,
    InventorySnapshot,
)
from src.core.entities.stock import (
    DiameterStock,
    InventoryStats,
    InventoryTransaction,
    KnownDiameter,
    RodStockEntry,
    TransactionType,
)

__all__ = [
    # Base
    "LedgerModel",
    "new_id",
    # Stock
    "RodStockEntry",
    "InventoryTransaction",
    "TransactionType",
    "KnownDiameter",
    "DiameterStock",
    "InventoryStats",
    # Process
    "Process",
    "ProcessSpec",
    "ProcessStatus",
    # Outputs
    "FinishedGood",
    "NonConformingItem",
    "RejectedItem",
    "WeightLossItem",
    "LeftoverMaterial",
    "ProcessSummary",
    "FinishedGoodsInput",
    "NonConformingInput",
    "RejectedInput",
    "ProcessOutputs",
    "Reconciliation",
    # Groups
    "ProcessGroup",
    # Reports
    "ReportKind",
    "ReportRow",
    "ProcessDetailRow",
    "FinishedGoodRow",
    "NonConformingRow",
    "RejectedRow",
    "WeightLossRow",
    "REPORT_FIELDS",
    "REPORT_ROW_MODELS",
    # Snapshot
    "CollectionKind",
    "COLLECTION_MODELS",
    "InventorySnapshot",
]
