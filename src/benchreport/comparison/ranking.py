"""Rank scenarios and compute how much slower each is than the fastest.

Ranking is a stable sort on ``average`` run time, so scenarios with equal
averages keep the order they were given in.  The first ranked scenario
is the reference; every other scenario gets a slowdown ratio

    reference.ips / other.ips

which is at least 1.0 whenever ips and average agree.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from benchreport.domain.scenario import ScenarioResult
from benchreport.errors import DivisionError


def rank(scenarios: Iterable[ScenarioResult]) -> list[ScenarioResult]:
    """Scenarios fastest first (ascending average, input order on ties)."""
    return sorted(scenarios, key=lambda s: s.stats.average)


def slowdown(reference: ScenarioResult, other: ScenarioResult) -> float:
    """How many times slower ``other`` is than ``reference``."""
    if other.stats.ips == 0:
        raise DivisionError(other.name)
    return reference.stats.ips / other.stats.ips


def compare(
    reference: ScenarioResult,
    others: Sequence[ScenarioResult],
) -> list[tuple[ScenarioResult, float]]:
    """Pair every scenario in ``others`` with its slowdown against ``reference``."""
    return [(other, slowdown(reference, other)) for other in others]
