"""benchreport: console reports for benchmark statistics.

Typical use from a harness:

    from benchreport import ReportConfiguration, ScenarioResult, RunStatistics, output

    output(results, ReportConfiguration(extended_columns=("minimum", "maximum")))
"""
from benchreport.console import (
    WriteOutcome,
    extended_options,
    format_report,
    format_scenarios,
    output,
    write,
)
from benchreport.conversion import ScalingStrategy
from benchreport.domain import (
    NO_INPUT,
    MultipleMode,
    ReportConfiguration,
    RunStatistics,
    ScenarioResult,
    SingleMode,
)
from benchreport.errors import ConfigurationError, DivisionError, ReportError
from benchreport.layout import Column

__all__ = [
    "NO_INPUT",
    "Column",
    "ConfigurationError",
    "DivisionError",
    "MultipleMode",
    "ReportConfiguration",
    "ReportError",
    "RunStatistics",
    "ScalingStrategy",
    "ScenarioResult",
    "SingleMode",
    "WriteOutcome",
    "extended_options",
    "format_report",
    "format_scenarios",
    "output",
    "write",
]
