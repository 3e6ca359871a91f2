"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.

Numeric ranges are checked by the core services so that every bad quantity
surfaces as the same INVALID_QUANTITY error, whatever the entry point.
"""

from pydantic import BaseModel, ConfigDict, Field

from src.core.entities.output import ProcessOutputs
from src.core.units import LengthUnit, MassUnit

# --- Stock ---


class DepositRequest(BaseModel):
    """Request to add a batch of rods to stock."""

    diameter: float = Field(..., description="Rod diameter in mm", examples=[12.0])
    weight: float = Field(..., description="Batch weight in kg", examples=[10.0])
    length: float | None = Field(default=None, description="Total length of the batch")
    length_unit: LengthUnit = Field(default=LengthUnit.MM, description="Unit of length")


class WithdrawRequest(BaseModel):
    """Request to take weight out of stock outside a process."""

    diameter: float = Field(..., description="Rod diameter in mm")
    amount: float = Field(..., description="Weight to withdraw in kg")
    process_id: str | None = Field(default=None, description="Process to tag the line with")
    process_name: str | None = Field(default=None, description="Process name for the line")


class RegisterDiameterRequest(BaseModel):
    """Request to add a size to the known rod or blade diameters."""

    diameter: float = Field(..., description="Diameter in mm")


# --- Processes ---


class CreateProcessRequest(BaseModel):
    """Request to start a process, reserving its weight from stock."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., description="Process name", examples=["Batch 42 cut"])
    process_id: str | None = Field(
        default=None,
        description="Human-readable process id (generated when omitted)",
        examples=["PROC-LX3K9Q2A-7G2KD"],
    )
    diameter: float = Field(..., description="Rod diameter in mm")
    weight_used: float = Field(..., description="Weight reserved from stock in kg")
    blade_diameter: float = Field(..., description="Cutting blade diameter in mm")
    total_length: float | None = Field(default=None, description="Total rod length in mm")
    number_of_rods: int = Field(..., description="Rods cut from the reserved weight")
    length_per_rod: float = Field(..., description="Length of each rod in length_unit")
    length_unit: LengthUnit = LengthUnit.MM
    weight_per_rod: float = Field(..., description="Planned weight of each rod in kg")
    wastage_per_rod: float = Field(default=0.0, description="Cutting waste per rod in wastage_unit")
    wastage_unit: MassUnit = MassUnit.G


class FinalizeProcessRequest(BaseModel):
    """Request to record a process's outputs and complete it."""

    outputs: ProcessOutputs = Field(default_factory=ProcessOutputs)
    add_leftover_to_stock: bool = Field(
        default=False,
        description="Deposit the leftover weight back into stock",
    )


# --- Groups ---


class CreateGroupRequest(BaseModel):
    """Request to create a process group."""

    name: str = Field(..., description="Group name")
    process_ids: list[str] = Field(..., description="Ids of the member processes")


class UpdateGroupRequest(BaseModel):
    """Request to rename a group or replace its members."""

    name: str | None = None
    process_ids: list[str] | None = None
