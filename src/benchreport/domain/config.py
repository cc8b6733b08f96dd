"""Per-call report configuration.

A harness usually hands formatter options over as a plain mapping, for
example ``{"comparison": True, "extended_options": ["minimum"]}``, with
the unit-scaling strategy kept as a separate top-level setting.
``ReportConfiguration.from_options`` turns that into a validated,
immutable configuration so that a misspelled column is reported before
any output exists.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from benchreport.conversion.scale import ScalingStrategy
from benchreport.errors import ConfigurationError
from benchreport.layout.columns import Column, parse_column

log = logging.getLogger(__name__)


def parse_extended_columns(
    identifiers: Iterable[Column | str] | Column | str,
) -> tuple[Column, ...]:
    """Resolve extended column identifiers, rejecting unknown ones and ``name``."""
    if isinstance(identifiers, (str, Column)):
        identifiers = (identifiers,)
    columns = []
    for identifier in identifiers:
        column = parse_column(identifier)
        if column is Column.NAME:
            raise ConfigurationError(
                column.value, "Extended option: name is always shown"
            )
        columns.append(column)
    return tuple(columns)


@dataclass(frozen=True, slots=True)
class ReportConfiguration:
    comparison: bool = True
    unit_scaling: ScalingStrategy | str = ScalingStrategy.BEST
    extended_columns: tuple[Column, ...] = ()

    def __post_init__(self) -> None:
        # Normalize in place; frozen dataclasses need object.__setattr__.
        object.__setattr__(
            self, "unit_scaling", ScalingStrategy.parse(self.unit_scaling)
        )
        object.__setattr__(
            self, "extended_columns", parse_extended_columns(self.extended_columns)
        )

    @classmethod
    def from_options(
        cls,
        options: Mapping[str, Any] | None = None,
        unit_scaling: ScalingStrategy | str = ScalingStrategy.BEST,
    ) -> ReportConfiguration:
        """Build a configuration from console formatter options.

        ``unit_scaling`` inside ``options`` is no longer honoured; it is a
        top-level setting.  Passing it there logs a warning and is ignored.
        """
        options = dict(options or {})
        if "unit_scaling" in options:
            log.warning(
                "unit_scaling is now a top level configuration option, "
                "avoid passing it as a formatter option."
            )
        unknown = set(options) - {"comparison", "extended_options", "unit_scaling"}
        for key in sorted(unknown):
            log.warning("Ignoring unknown console option %r", key)
        return cls(
            comparison=bool(options.get("comparison", True)),
            unit_scaling=unit_scaling,
            extended_columns=tuple(options.get("extended_options") or ()),
        )
