"""Render scaled numbers as text.

Numbers are always printed in fixed-point notation; a duration of
200000.1 μs in milliseconds is "200.00 ms", never "2.0e2 ms".
"""
from __future__ import annotations

from benchreport.conversion.units import Unit


def float_precision(value: float) -> int:
    """Decimal places for a scaled value: small numbers get more."""
    if value == int(value):
        return 0
    magnitude = abs(value)
    if magnitude < 0.01:
        return 5
    if magnitude < 0.1:
        return 4
    if magnitude < 0.2:
        return 3
    return 2


def format_number(value: float | int) -> str:
    if isinstance(value, int):
        return str(value)
    return f"{value:.{float_precision(value)}f}"


def format_value(value: float, unit: Unit) -> str:
    """Format ``value`` (in base units) in ``unit``, symbol included."""
    number = format_number(unit.scale(value))
    if not unit.symbol:
        return number
    return f"{number} {unit.symbol}"


def format_deviation(std_dev_ratio: float) -> str:
    """Relative standard deviation as a percentage, e.g. "±10.00%"."""
    return f"±{std_dev_ratio * 100:.2f}%"


def format_plain(value: int | float) -> str:
    """Unscaled value, integers without a decimal point."""
    if isinstance(value, float) and value == int(value):
        return str(int(value))
    return format_number(value)
