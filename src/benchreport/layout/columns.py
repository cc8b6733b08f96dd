"""Column catalogue for the console report.

Every statistic the report can show is one ``Column`` member, and every
member has exactly one ``ColumnSpec`` describing its header label,
static width, alignment and how its raw value is pulled out of a
``RunStatistics``.  Asking for anything outside this closed set is a
configuration mistake and fails loudly.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

from benchreport.conversion.units import QuantityKind
from benchreport.errors import ConfigurationError

if TYPE_CHECKING:
    from benchreport.domain.statistics import Mode, RunStatistics

# Header of the name column; also its minimum width.
NAME_LABEL = "Name"


class Column(Enum):
    NAME = "name"
    IPS = "ips"
    AVERAGE = "average"
    DEVIATION = "deviation"
    MEDIAN = "median"
    PERCENTILE = "percentile"
    MINIMUM = "minimum"
    MAXIMUM = "maximum"
    SAMPLE_SIZE = "sample_size"
    MODE = "mode"


def _mode_values(stats: RunStatistics) -> tuple[float, ...] | None:
    mode: Mode | None = stats.mode
    return None if mode is None else mode.values()


@dataclass(frozen=True, slots=True)
class ColumnSpec:
    label: str
    width: int
    kind: QuantityKind
    value: Callable[[RunStatistics], object] | None
    left_aligned: bool = False


COLUMN_SPECS: dict[Column, ColumnSpec] = {
    Column.NAME: ColumnSpec(NAME_LABEL, len(NAME_LABEL), QuantityKind.PLAIN, None,
                            left_aligned=True),
    Column.IPS: ColumnSpec("ips", 13, QuantityKind.COUNT, lambda s: s.ips),
    Column.AVERAGE: ColumnSpec("average", 15, QuantityKind.DURATION,
                               lambda s: s.average),
    Column.DEVIATION: ColumnSpec("deviation", 11, QuantityKind.DEVIATION,
                                 lambda s: s.std_dev_ratio),
    Column.MEDIAN: ColumnSpec("median", 15, QuantityKind.DURATION,
                              lambda s: s.median),
    Column.PERCENTILE: ColumnSpec("99th %", 15, QuantityKind.DURATION,
                                  lambda s: s.percentile(99)),
    Column.MINIMUM: ColumnSpec("minimum", 15, QuantityKind.DURATION,
                               lambda s: s.minimum),
    Column.MAXIMUM: ColumnSpec("maximum", 15, QuantityKind.DURATION,
                               lambda s: s.maximum),
    Column.SAMPLE_SIZE: ColumnSpec("sample size", 15, QuantityKind.PLAIN,
                                   lambda s: s.sample_size),
    Column.MODE: ColumnSpec("mode", 15, QuantityKind.DURATION, _mode_values),
}

DEFAULT_COLUMNS: tuple[Column, ...] = (
    Column.NAME,
    Column.IPS,
    Column.AVERAGE,
    Column.DEVIATION,
    Column.MEDIAN,
    Column.PERCENTILE,
)


def parse_column(identifier: Column | str) -> Column:
    """Resolve a column identifier such as "minimum" or ":sample_size".

    Raises ConfigurationError naming the identifier when it is unknown.
    """
    if isinstance(identifier, Column):
        return identifier
    if isinstance(identifier, str):
        key = identifier.lstrip(":")
        for column in Column:
            if column.value == key:
                return column
        raise ConfigurationError(
            key, f"Extended option: {key} not supported"
        )
    raise ConfigurationError(
        identifier, f"Extended option: {identifier!r} not supported"
    )


def spec_for(column: Column) -> ColumnSpec:
    try:
        return COLUMN_SPECS[column]
    except KeyError:
        raise ConfigurationError(column) from None
