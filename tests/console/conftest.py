"""Shared helpers for console report tests."""
from __future__ import annotations

import re

import pytest

from benchreport.domain.config import ReportConfiguration
from benchreport.domain.scenario import NO_INPUT, ScenarioResult
from benchreport.domain.statistics import RunStatistics

EXTENDED = ("minimum", "maximum", "sample_size")


def make_scenario(
    name: str,
    average: float,
    ips: float,
    std_dev_ratio: float = 0.1,
    median: float | None = None,
    p99: float | None = None,
    input_name: object = NO_INPUT,
    **extra: object,
) -> ScenarioResult:
    """Scenario with sensible defaults for the statistics a test ignores."""
    stats = RunStatistics(
        average=average,
        ips=ips,
        std_dev_ratio=std_dev_ratio,
        median=average if median is None else median,
        percentiles={99: average * 2 if p99 is None else p99},
        **extra,
    )
    return ScenarioResult(name=name, stats=stats, input_name=input_name)


def assert_column_width(name: str, line: str, expected_width: int) -> None:
    """Check the name column plus the ips column spans the expected width.

    ``expected_width`` is the longest name in the group; the name column
    adds one space and the ips column adds 13 characters.
    """
    expected = expected_width + 14
    pattern = re.compile(
        rf"({re.escape(name)} +([0-9.]+( [A-Za-z]+)?|ips))( |$)", re.M
    )
    match = pattern.search(line)
    assert match is not None, f"{name!r} not found in {line!r}"
    column = match.group(1)
    assert len(column) == expected, (
        f"Expected column width of {expected}, got {len(column)}\n"
        f"line:   {line.strip()!r}\n"
        f"column: {column!r}"
    )


@pytest.fixture
def console_config() -> ReportConfiguration:
    return ReportConfiguration(comparison=True, unit_scaling="best")


@pytest.fixture
def extended_config() -> ReportConfiguration:
    return ReportConfiguration(extended_columns=EXTENDED)


@pytest.fixture
def two_scenarios() -> list[ScenarioResult]:
    """Second listed first, so ranking has to reorder them."""
    return [
        make_scenario("Second", 200.0, 5_000.0, median=195.5, p99=400.1),
        make_scenario("First", 100.0, 10_000.0, median=90.0, p99=300.1),
    ]
