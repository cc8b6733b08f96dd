"""Fixed-width text rows.

Columns are separated by padding alone: the name column is padded on
the right, every other column on the left.  Widths come from the
column catalogue unless the caller overrides them for one call, which
is how the name column grows to fit the longest scenario name.  The
same overrides must be passed for every line of a group so that the
header, scenario rows and comparison rows stay aligned.

Values wider than their column are printed in full, never truncated.
"""
from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from benchreport.layout.columns import NAME_LABEL, Column, spec_for

WidthOverrides = Mapping[Column, int]


def width(column: Column, overrides: WidthOverrides | None = None) -> int:
    """Width of ``column`` for this call: the override if any, else static."""
    if overrides and column in overrides:
        return overrides[column]
    return spec_for(column).width


def name_width(names: Iterable[str]) -> int:
    """Width of the name column: longest name (or header) plus one space."""
    return max([len(NAME_LABEL), *(len(n) for n in names)]) + 1


def _cell(column: Column, text: str, overrides: WidthOverrides | None) -> str:
    w = width(column, overrides)
    if spec_for(column).left_aligned:
        return text.ljust(w)
    return text.rjust(w)


def render_header(
    columns: Sequence[Column],
    overrides: WidthOverrides | None = None,
    leading_newline: bool = True,
) -> str:
    """Header line listing each column's label."""
    line = "".join(_cell(c, spec_for(c).label, overrides) for c in columns)
    prefix = "\n" if leading_newline else ""
    return f"{prefix}{line}\n"


def render_row(
    columns: Sequence[Column],
    cells: Mapping[Column, str],
    overrides: WidthOverrides | None = None,
    suffix: str = "",
) -> str:
    """One data line.  ``cells`` maps every column to its formatted text."""
    line = "".join(_cell(c, cells[c], overrides) for c in columns)
    return f"{line}{suffix}\n"
