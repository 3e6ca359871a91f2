"""Manufacturing process entities."""

from datetime import datetime
from enum import Enum

from pydantic import Field

from src.core.entities.base import LedgerModel, new_id, utcnow
from src.core.units import LengthUnit, MassUnit


class ProcessStatus(str, Enum):
    """Process lifecycle states. COMPLETED is terminal."""

    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class ProcessSpec(LedgerModel):
    """
    Caller's request to start a process.

    length_per_rod and wastage_per_rod are expressed in length_unit and
    wastage_unit; the lifecycle service converts them to mm and kg.
    """

    name: str
    process_id: str | None = None  # generated when omitted
    diameter: float
    weight_used: float
    blade_diameter: float
    total_length: float | None = None
    number_of_rods: int
    length_per_rod: float
    length_unit: LengthUnit = LengthUnit.MM
    weight_per_rod: float
    wastage_per_rod: float = 0.0
    wastage_unit: MassUnit = MassUnit.G


class Process(LedgerModel):
    """One manufacturing run holding reserved stock."""

    id: str = Field(default_factory=new_id)
    name: str
    process_id: str
    diameter: float = Field(gt=0)
    weight_used: float = Field(gt=0)  # kg, fixed for the process lifetime
    blade_diameter: float = Field(gt=0)
    total_length: float | None = Field(default=None, ge=0)
    number_of_rods: int = Field(gt=0)
    length_per_rod: float = Field(ge=0)  # mm
    length_unit: LengthUnit = LengthUnit.MM
    weight_per_rod: float = Field(ge=0)  # kg
    wastage_per_rod: float = Field(default=0.0, ge=0)  # kg
    wastage_unit: MassUnit = MassUnit.G
    status: ProcessStatus = ProcessStatus.IN_PROGRESS
    created_at: datetime = Field(default_factory=utcnow)
    completed_at: datetime | None = None

    @property
    def is_in_progress(self) -> bool:
        return self.status == ProcessStatus.IN_PROGRESS
