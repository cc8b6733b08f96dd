"""Unit tables, unit scaling and number formatting."""

from benchreport.conversion.format import (
    format_deviation,
    format_plain,
    format_value,
)
from benchreport.conversion.scale import ScalingStrategy, scale_units, unit_for
from benchreport.conversion.units import QuantityKind, Unit, base_unit, find_unit

__all__ = [
    "QuantityKind",
    "ScalingStrategy",
    "Unit",
    "base_unit",
    "find_unit",
    "format_deviation",
    "format_plain",
    "format_value",
    "scale_units",
    "unit_for",
]
