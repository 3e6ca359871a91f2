"""
Unit conversion for lengths and masses.

Canonical units are millimetres for length and kilograms for mass. Every
weight that flows through the ledger is rounded with round_weight so that
sums and differences stay exact at the configured precision.
"""

from enum import Enum

from src.core.exceptions import ValidationError

DEFAULT_WEIGHT_DECIMALS = 3


class LengthUnit(str, Enum):
    """Supported length units."""

    MM = "mm"
    CM = "cm"
    M = "m"


class MassUnit(str, Enum):
    """Supported mass units."""

    G = "g"
    KG = "kg"


_MM_PER_UNIT: dict[LengthUnit, float] = {
    LengthUnit.MM: 1.0,
    LengthUnit.CM: 10.0,
    LengthUnit.M: 1000.0,
}


def parse_length_unit(unit: str | LengthUnit) -> LengthUnit:
    """Resolve a length unit, raising ValidationError for unknown units."""
    try:
        return LengthUnit(unit)
    except ValueError:
        raise ValidationError("length_unit", "unknown length unit", unit) from None


def parse_mass_unit(unit: str | MassUnit) -> MassUnit:
    """Resolve a mass unit, raising ValidationError for unknown units."""
    try:
        return MassUnit(unit)
    except ValueError:
        raise ValidationError("mass_unit", "unknown mass unit", unit) from None


def to_mm(value: float, unit: str | LengthUnit = LengthUnit.MM) -> float:
    """Convert a length to millimetres."""
    return value * _MM_PER_UNIT[parse_length_unit(unit)]


def from_mm(value: float, unit: str | LengthUnit = LengthUnit.MM) -> float:
    """Convert millimetres to the given length unit."""
    return value / _MM_PER_UNIT[parse_length_unit(unit)]


def convert_length(
    value: float,
    from_unit: str | LengthUnit,
    to_unit: str | LengthUnit,
) -> float:
    """Convert a length between any two supported units."""
    return from_mm(to_mm(value, from_unit), to_unit)


def to_kg(value: float, unit: str | MassUnit = MassUnit.KG) -> float:
    """Convert a mass to kilograms."""
    if parse_mass_unit(unit) is MassUnit.G:
        return value / 1000
    return value


def round_weight(value: float, decimals: int = DEFAULT_WEIGHT_DECIMALS) -> float:
    """Round a weight (kg) to the ledger precision, normalising -0.0 to 0.0."""
    return round(value, decimals) + 0.0
