"""Console report: assembly of text blocks and writing them out."""

from benchreport.console.formatter import (
    extended_options,
    format_report,
    format_scenarios,
)
from benchreport.console.writer import WriteOutcome, output, write

__all__ = [
    "WriteOutcome",
    "extended_options",
    "format_report",
    "format_scenarios",
    "output",
    "write",
]
