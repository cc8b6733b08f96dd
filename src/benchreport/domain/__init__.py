"""Data model consumed by the report formatter.

Re-exports all public types for convenient access:
    from benchreport.domain import ScenarioResult, RunStatistics, ReportConfiguration
"""
from benchreport.domain.statistics import (
    Mode,
    MultipleMode,
    RunStatistics,
    SingleMode,
    mode_from,
)
from benchreport.domain.scenario import (
    NO_INPUT,
    ScenarioResult,
    group_by_input,
    scenario_from_dict,
)
from benchreport.domain.config import ReportConfiguration, parse_extended_columns

__all__ = [
    "Mode",
    "MultipleMode",
    "NO_INPUT",
    "ReportConfiguration",
    "RunStatistics",
    "ScenarioResult",
    "SingleMode",
    "group_by_input",
    "mode_from",
    "parse_extended_columns",
    "scenario_from_dict",
]
