"""Scenario results and grouping by input."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from benchreport.domain.statistics import RunStatistics


class _NoInput:
    """Sentinel for scenarios that were run without an input."""

    _instance: _NoInput | None = None

    def __new__(cls) -> _NoInput:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_INPUT"

    def __reduce__(self) -> str:
        return "NO_INPUT"


NO_INPUT = _NoInput()


@dataclass(frozen=True, slots=True)
class ScenarioResult:
    """One benchmark job run against one input."""
    name: str
    stats: RunStatistics
    input_name: str | _NoInput | None = NO_INPUT

    def __post_init__(self) -> None:
        if self.input_name is None:
            object.__setattr__(self, "input_name", NO_INPUT)

    @property
    def has_input(self) -> bool:
        return self.input_name is not NO_INPUT


def group_by_input(
    results: Iterable[ScenarioResult],
) -> list[tuple[str | _NoInput, list[ScenarioResult]]]:
    """Group results by input name, in order of first appearance.

    Scenario order inside a group follows the input order, which the
    ranking step relies on to break ties.
    """
    groups: dict[str | _NoInput, list[ScenarioResult]] = {}
    for result in results:
        key = result.input_name if result.has_input else NO_INPUT
        groups.setdefault(key, []).append(result)
    return list(groups.items())


def scenario_from_dict(data: dict) -> ScenarioResult:
    """Create a ScenarioResult from ``{"name", "input_name"?, "statistics"}``.

    A missing or null ``input_name`` means the scenario had no input.
    """
    input_name = data.get("input_name")
    return ScenarioResult(
        name=str(data["name"]),
        stats=RunStatistics.from_dict(data["statistics"]),
        input_name=NO_INPUT if input_name is None else str(input_name),
    )
