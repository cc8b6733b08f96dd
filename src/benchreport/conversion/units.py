"""Unit tables for the quantities a report can scale.

Each quantity kind owns an ordered tuple of units, finest first.  A
unit's ``magnitude`` is how many base units it holds, so scaling a
value is a single division.

Durations are measured in microseconds.  Counts (iterations per second)
have a base unit with no symbol.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class QuantityKind(Enum):
    DURATION = auto()
    COUNT = auto()
    DEVIATION = auto()
    PLAIN = auto()


@dataclass(frozen=True, slots=True)
class Unit:
    name: str
    magnitude: float
    symbol: str

    def scale(self, value: float) -> float:
        return value / self.magnitude


MICROSECOND = Unit("microsecond", 1, "μs")
MILLISECOND = Unit("millisecond", 1_000, "ms")
SECOND = Unit("second", 1_000_000, "s")
MINUTE = Unit("minute", 60_000_000, "min")
HOUR = Unit("hour", 3_600_000_000, "h")

ONE = Unit("one", 1, "")
THOUSAND = Unit("thousand", 1_000, "K")
MILLION = Unit("million", 1_000_000, "M")
BILLION = Unit("billion", 1_000_000_000, "B")

UNIT_TABLES: dict[QuantityKind, tuple[Unit, ...]] = {
    QuantityKind.DURATION: (MICROSECOND, MILLISECOND, SECOND, MINUTE, HOUR),
    QuantityKind.COUNT: (ONE, THOUSAND, MILLION, BILLION),
}


def units_of(kind: QuantityKind) -> tuple[Unit, ...]:
    """Return the unit table for a scalable kind, finest unit first."""
    try:
        return UNIT_TABLES[kind]
    except KeyError:
        raise ValueError(f"{kind.name} values are not unit-scaled") from None


def base_unit(kind: QuantityKind) -> Unit:
    return units_of(kind)[0]


def find_unit(kind: QuantityKind, name: str) -> Unit | None:
    """Look up a unit of ``kind`` by name or symbol, or None."""
    for unit in units_of(kind):
        if name in (unit.name, unit.symbol) and name:
            return unit
    return None
