"""Tests for scenario results, statistics and grouping."""
from __future__ import annotations

import copy

from benchreport.domain.scenario import (
    NO_INPUT,
    ScenarioResult,
    group_by_input,
    scenario_from_dict,
)
from benchreport.domain.statistics import (
    MultipleMode,
    RunStatistics,
    SingleMode,
    mode_from,
)


def _stats(average: float = 100.0) -> RunStatistics:
    return RunStatistics(average=average, ips=1_000_000 / average,
                         std_dev_ratio=0.1, median=average)


class TestNoInput:
    def test_is_a_singleton(self) -> None:
        assert copy.deepcopy(NO_INPUT) is NO_INPUT
        assert repr(NO_INPUT) == "NO_INPUT"

    def test_default_input(self) -> None:
        result = ScenarioResult("job", _stats())
        assert result.input_name is NO_INPUT
        assert result.has_input is False
        assert ScenarioResult("job", _stats(), "big").has_input is True

    def test_none_input_means_no_input(self) -> None:
        result = ScenarioResult("job", _stats(), None)
        assert result.input_name is NO_INPUT
        assert result.has_input is False


class TestGroupByInput:
    def test_none_and_no_input_share_a_group(self) -> None:
        results = [
            ScenarioResult("a", _stats(), None),
            ScenarioResult("b", _stats()),
        ]
        (group,) = group_by_input(results)
        assert group[0] is NO_INPUT
        assert [s.name for s in group[1]] == ["a", "b"]

    def test_first_appearance_order(self) -> None:
        results = [
            ScenarioResult("a", _stats(), "small"),
            ScenarioResult("a", _stats(), "big"),
            ScenarioResult("b", _stats(), "small"),
        ]
        groups = group_by_input(results)
        assert [name for name, _ in groups] == ["small", "big"]
        assert [s.name for s in groups[0][1]] == ["a", "b"]

    def test_no_input_group(self) -> None:
        (group,) = group_by_input([ScenarioResult("a", _stats())])
        assert group[0] is NO_INPUT


class TestModes:
    def test_mode_from(self) -> None:
        assert mode_from(None) is None
        assert mode_from(3) == SingleMode(3.0)
        assert mode_from([4.0]) == SingleMode(4.0)
        assert mode_from([2.0, 1.0]) == MultipleMode((2.0, 1.0))

    def test_values_keep_order(self) -> None:
        assert MultipleMode((3.0, 1.0, 2.0)).values() == (3.0, 1.0, 2.0)
        assert SingleMode(5.0).values() == (5.0,)


class TestFromDict:
    def test_parses_json_shape(self) -> None:
        result = scenario_from_dict({
            "name": "Job",
            "input_name": "Big List",
            "statistics": {
                "average": 200, "ips": 5000, "std_dev_ratio": 0.1,
                "median": 195.5, "percentiles": {"50": 195.5, "99": 400.1},
                "minimum": 120.0, "sample_size": 40, "mode": [190.0, 210.0],
            },
        })
        assert result.name == "Job"
        assert result.input_name == "Big List"
        assert result.stats.percentile(99) == 400.1
        assert result.stats.percentile(95) is None
        assert result.stats.maximum is None
        assert result.stats.sample_size == 40
        assert result.stats.mode == MultipleMode((190.0, 210.0))

    def test_missing_input_name(self) -> None:
        result = scenario_from_dict({
            "name": "Job",
            "statistics": {"average": 1, "ips": 1, "std_dev_ratio": 0, "median": 1},
        })
        assert result.input_name is NO_INPUT
        assert result.stats.percentiles == {}
