"""Unit scaling: choose one display unit for a column of values.

A column reads best when every value in it shares a unit, so the unit
is picked once for the whole collection rather than per value:

    best      unit of the largest value.  The biggest number lands in
              [1, 1000) where the table allows and nothing is pushed
              into exponent territory.
    largest   coarsest of the units each value would pick on its own.
    smallest  finest of those units.
    none      always the base unit.

A strategy may also name a unit outright ("millisecond", "ms", "K").
Columns whose kind has no unit of that name fall back to ``best``.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable

from benchreport.conversion.units import (
    QuantityKind,
    Unit,
    UNIT_TABLES,
    base_unit,
    find_unit,
    units_of,
)
from benchreport.errors import ConfigurationError

log = logging.getLogger(__name__)


class ScalingStrategy(Enum):
    BEST = "best"
    LARGEST = "largest"
    SMALLEST = "smallest"
    NONE = "none"

    @classmethod
    def parse(cls, value: ScalingStrategy | str) -> ScalingStrategy | str:
        """Return the strategy for ``value``, or the unit name it pins.

        Raises ConfigurationError when ``value`` is neither a strategy
        nor the name or symbol of any known unit.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ConfigurationError(value, f"Unknown unit scaling: {value!r}")
        key = value.lstrip(":").lower()
        for strategy in cls:
            if strategy.value == key:
                return strategy
        name = value.lstrip(":")
        if any(find_unit(kind, name) for kind in UNIT_TABLES):
            return name
        raise ConfigurationError(value, f"Unknown unit scaling: {value!r}")


def unit_for(kind: QuantityKind, value: float) -> Unit:
    """The coarsest unit whose magnitude does not exceed ``value``."""
    chosen = base_unit(kind)
    for unit in units_of(kind):
        if value >= unit.magnitude:
            chosen = unit
    return chosen


def scale_units(
    kind: QuantityKind,
    values: Iterable[float | None],
    strategy: ScalingStrategy | str = ScalingStrategy.BEST,
) -> Unit:
    """Pick the single unit used to display every value in ``values``."""
    present = [v for v in values if v is not None]
    strategy = ScalingStrategy.parse(strategy)
    if isinstance(strategy, str):
        pinned = find_unit(kind, strategy)
        if pinned is not None:
            return pinned
        strategy = ScalingStrategy.BEST

    if strategy is ScalingStrategy.NONE or not any(present):
        return base_unit(kind)

    if strategy is ScalingStrategy.BEST:
        chosen = unit_for(kind, max(present))
    else:
        per_value = [unit_for(kind, v) for v in present]
        if strategy is ScalingStrategy.LARGEST:
            chosen = max(per_value, key=lambda u: u.magnitude)
        else:
            chosen = min(per_value, key=lambda u: u.magnitude)
    log.debug(
        "Scaled %d %s value(s) to %s (%s)",
        len(present), kind.name.lower(), chosen.name, strategy.value,
    )
    return chosen
