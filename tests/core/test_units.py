"""Unit tests for length and mass conversion."""

import pytest

from src.core.exceptions import ValidationError
from src.core.units import (
    LengthUnit,
    MassUnit,
    convert_length,
    from_mm,
    round_weight,
    to_kg,
    to_mm,
)


class TestLengthConversion:
    @pytest.mark.parametrize(
        ("value", "unit", "expected"),
        [
            (25.0, LengthUnit.MM, 25.0),
            (2.5, LengthUnit.CM, 25.0),
            (1.2, LengthUnit.M, 1200.0),
            (3, "cm", 30.0),
        ],
    )
    def test_to_mm(self, value, unit, expected):
        assert to_mm(value, unit) == pytest.approx(expected)

    def test_from_mm(self):
        assert from_mm(1500.0, LengthUnit.M) == pytest.approx(1.5)

    def test_convert_between_units(self):
        assert convert_length(1.0, "m", "cm") == pytest.approx(100.0)

    def test_unknown_unit_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            to_mm(1.0, "inch")
        assert exc_info.value.details["field"] == "length_unit"


class TestMassConversion:
    def test_grams_to_kg(self):
        assert to_kg(125.0, MassUnit.G) == pytest.approx(0.125)

    def test_kg_unchanged(self):
        assert to_kg(2.5, "kg") == 2.5

    def test_unknown_unit_raises(self):
        with pytest.raises(ValidationError):
            to_kg(1.0, "lb")


class TestRoundWeight:
    def test_rounds_to_three_decimals_by_default(self):
        assert round_weight(0.1 + 0.2) == 0.3

    def test_custom_precision(self):
        assert round_weight(1.23456, 2) == 1.23

    def test_negative_zero_normalised(self):
        result = round_weight(-0.0001)
        assert result == 0.0
        assert str(result) == "0.0"
