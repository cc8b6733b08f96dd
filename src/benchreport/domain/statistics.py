"""Run-time statistics for a single scenario.

The formatter consumes these as-is.  Nothing here recomputes a mean or
a percentile: the harness hands over finished numbers and the report
only scales and prints them.

All time values are microseconds.  ``ips`` is iterations per second and
is expected to agree with ``average`` (roughly ``1_000_000 / average``).
"""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class SingleMode:
    """The sample had one most frequent value."""
    value: float

    def values(self) -> tuple[float, ...]:
        return (self.value,)


@dataclass(frozen=True, slots=True)
class MultipleMode:
    """Several values tied for most frequent.

    Order is kept exactly as the producer supplied it.
    """
    modes: tuple[float, ...]

    def values(self) -> tuple[float, ...]:
        return self.modes


Mode = SingleMode | MultipleMode


def mode_from(raw: float | list[float] | tuple[float, ...] | None) -> Mode | None:
    """Wrap a raw mode value (number or sequence of numbers) in its variant."""
    if raw is None:
        return None
    if isinstance(raw, (list, tuple)):
        if len(raw) == 1:
            return SingleMode(float(raw[0]))
        return MultipleMode(tuple(float(v) for v in raw))
    return SingleMode(float(raw))


@dataclass(frozen=True, slots=True)
class RunStatistics:
    average: float
    ips: float
    std_dev_ratio: float
    median: float
    percentiles: dict[int, float] = field(default_factory=dict)
    minimum: float | None = None
    maximum: float | None = None
    sample_size: int | None = None
    mode: Mode | None = None

    def percentile(self, rank: int) -> float | None:
        """Return the given percentile, or None if it was not computed."""
        return self.percentiles.get(rank)

    @classmethod
    def from_dict(cls, data: dict) -> RunStatistics:
        """Create RunStatistics from a JSON-style mapping.

        Percentile keys may be strings ("99"), as JSON object keys are.
        """
        return cls(
            average=float(data["average"]),
            ips=float(data["ips"]),
            std_dev_ratio=float(data["std_dev_ratio"]),
            median=float(data["median"]),
            percentiles={
                int(k): float(v) for k, v in (data.get("percentiles") or {}).items()
            },
            minimum=data.get("minimum"),
            maximum=data.get("maximum"),
            sample_size=data.get("sample_size"),
            mode=mode_from(data.get("mode")),
        )
