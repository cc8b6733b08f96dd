"""Column catalogue and fixed-width row rendering."""

from benchreport.layout.columns import (
    COLUMN_SPECS,
    DEFAULT_COLUMNS,
    Column,
    ColumnSpec,
    parse_column,
    spec_for,
)
from benchreport.layout.table import name_width, render_header, render_row, width

__all__ = [
    "COLUMN_SPECS",
    "DEFAULT_COLUMNS",
    "Column",
    "ColumnSpec",
    "name_width",
    "parse_column",
    "render_header",
    "render_row",
    "spec_for",
    "width",
]
