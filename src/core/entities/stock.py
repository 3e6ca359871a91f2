"""Rod stock entities."""

from datetime import datetime
from enum import Enum

from pydantic import Field

from src.core.entities.base import LedgerModel, new_id, utcnow


class TransactionType(str, Enum):
    """Direction of a stock movement."""

    IN = "in"
    OUT = "out"


class RodStockEntry(LedgerModel):
    """One discrete batch of raw rod material of a single diameter."""

    id: str = Field(default_factory=new_id)
    diameter: float = Field(gt=0)  # mm
    weight: float = Field(gt=0)  # kg
    total_length: float | None = Field(default=None, ge=0)  # mm
    created_at: datetime = Field(default_factory=utcnow)


class InventoryTransaction(LedgerModel):
    """Append-only ledger line for one deposit or withdrawal."""

    id: str = Field(default_factory=new_id)
    date: datetime = Field(default_factory=utcnow)
    diameter: float = Field(gt=0)
    weight: float = Field(gt=0)
    length: float | None = Field(default=None, ge=0)
    type: TransactionType
    process_id: str | None = None
    process_name: str | None = None


class KnownDiameter(LedgerModel):
    """A previously seen rod or blade diameter (mm)."""

    diameter: float = Field(gt=0)


class DiameterStock(LedgerModel):
    """Available stock for one diameter."""

    diameter: float
    weight: float
    entries: int = 0


class InventoryStats(LedgerModel):
    """Overall stock totals with a per-diameter breakdown."""

    total_entries: int = 0
    total_weight: float = 0.0
    by_diameter: list[DiameterStock] = Field(default_factory=list)
