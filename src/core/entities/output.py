"""Process output records, reported outputs and the completion summary."""

from datetime import datetime

from pydantic import AliasChoices, Field

from src.core.entities.base import LedgerModel, new_id, utcnow
from src.core.units import LengthUnit


class FinishedGood(LedgerModel):
    """Conforming items produced by a process."""

    id: str = Field(default_factory=new_id)
    process_id: str
    count: int = Field(ge=0, validation_alias=AliasChoices("count", "number"))
    height: float | None = Field(default=None, ge=0)  # mm
    weight_per_item: float = Field(ge=0)
    weight: float = Field(ge=0)
    created_at: datetime = Field(default_factory=utcnow)


class NonConformingItem(LedgerModel):
    """Items outside tolerance but not scrapped."""

    id: str = Field(default_factory=new_id)
    process_id: str
    count: int = Field(ge=0, validation_alias=AliasChoices("count", "number"))
    height: float | None = Field(default=None, ge=0)  # mm
    weight_per_item: float = Field(ge=0)
    weight: float = Field(ge=0)
    include_in_report: bool = False
    created_at: datetime = Field(default_factory=utcnow)


class RejectedItem(LedgerModel):
    """Scrapped items."""

    id: str = Field(default_factory=new_id)
    process_id: str
    count: int = Field(ge=0, validation_alias=AliasChoices("count", "number"))
    weight_per_item: float = Field(ge=0)
    weight: float = Field(ge=0)
    reason: str = ""
    include_in_report: bool = False
    created_at: datetime = Field(default_factory=utcnow)


class WeightLossItem(LedgerModel):
    """Cutting waste and off-cuts of a process."""

    id: str = Field(default_factory=new_id)
    process_id: str
    weight: float = Field(ge=0)
    weight_loss_per_rod: float = Field(default=0.0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)


class LeftoverMaterial(LedgerModel):
    """Unused material returned to stock when a process completed."""

    id: str = Field(default_factory=new_id)
    process_id: str
    diameter: float = Field(gt=0)
    weight: float = Field(gt=0)
    created_at: datetime = Field(default_factory=utcnow)


class ProcessSummary(LedgerModel):
    """Mass balance recorded atomically with process completion."""

    id: str = Field(default_factory=new_id)
    process_id: str
    total_weight_used: float = Field(ge=0)
    total_weight_loss: float = Field(ge=0)
    remaining_weight: float = Field(ge=0)
    weight_loss_per_rod: float = Field(default=0.0, ge=0)
    added_back_to_stock: bool = Field(
        default=False,
        validation_alias=AliasChoices("addedBackToStock", "addRemainingToStock"),
    )
    created_at: datetime = Field(default_factory=utcnow)


# Reported outputs of a process, before records are created


class FinishedGoodsInput(LedgerModel):
    """Finished goods as reported by the operator."""

    count: int = Field(validation_alias=AliasChoices("count", "number"))
    weight_per_item: float
    height: float | None = None
    height_unit: LengthUnit = LengthUnit.MM


class NonConformingInput(FinishedGoodsInput):
    include_in_report: bool = False


class RejectedInput(LedgerModel):
    count: int = Field(validation_alias=AliasChoices("count", "number"))
    weight_per_item: float
    reason: str = ""
    include_in_report: bool = False


class ProcessOutputs(LedgerModel):
    """
    Everything reported when a process finishes.

    weight_loss_per_rod defaults to the process's wastage per rod. The two
    overrides replace the derived weight loss and leftover outright.
    """

    finished_goods: FinishedGoodsInput | None = None
    non_conforming: NonConformingInput | None = None
    rejected: RejectedInput | None = None
    weight_loss_per_rod: float | None = None
    weight_loss_override: float | None = None
    leftover_override: float | None = None


class Reconciliation(LedgerModel):
    """Mass balance of a process against its reserved weight (kg)."""

    weight_used: float
    finished_weight: float = 0.0
    non_conforming_weight: float = 0.0
    rejected_weight: float = 0.0
    weight_loss_per_rod: float = 0.0
    weight_loss_weight: float = 0.0
    leftover_weight: float = 0.0
    total_accounted: float = 0.0
    # weight_used minus everything but leftover; negative when outputs exceed it
    discrepancy: float = 0.0
    clamped: bool = False
