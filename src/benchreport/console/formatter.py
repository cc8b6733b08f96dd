"""Console report assembly.

Turns a finished set of scenario results into text blocks, one block
per input, in the order each input first appears:

    ##### With input Big List #####          (omitted without an input)

    Name                  ips        average  deviation         median         99th %
    flat_map           2.35 K      425.40 μs    ±10.13%      419.50 μs      608.63 μs
    map.flatten        1.23 K      814.24 μs    ±24.21%      767.50 μs      990.24 μs

    Comparison:
    flat_map           2.35 K
    map.flatten        1.23 K - 1.91x slower

    Extended options:
    Name                minimum        maximum    sample size
    ...

Every block is a list of strings, each ending in a newline.  Units are
chosen once per numeric column over the whole group, and the name
column is as wide as the longest name in the group for every line.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from benchreport.comparison.ranking import compare, rank
from benchreport.conversion.format import format_deviation, format_plain, format_value
from benchreport.conversion.scale import ScalingStrategy, scale_units
from benchreport.conversion.units import QuantityKind, Unit
from benchreport.domain.config import ReportConfiguration
from benchreport.domain.scenario import NO_INPUT, ScenarioResult, group_by_input
from benchreport.layout.columns import DEFAULT_COLUMNS, Column, spec_for
from benchreport.layout.table import name_width, render_header, render_row

MISSING = "N/A"
COMPARISON_BANNER = "\nComparison: \n"
EXTENDED_BANNER = "\nExtended options: \n"

UnitsByColumn = dict[Column, Unit]


def _configuration(
    config: ReportConfiguration | Mapping[str, Any] | None,
) -> ReportConfiguration:
    if config is None:
        return ReportConfiguration()
    if isinstance(config, ReportConfiguration):
        return config
    options = dict(config)
    unit_scaling = options.pop("unit_scaling", ScalingStrategy.BEST)
    return ReportConfiguration.from_options(options, unit_scaling=unit_scaling)


def input_header(input_name: object) -> str | None:
    if input_name is None or input_name is NO_INPUT:
        return None
    return f"\n##### With input {input_name} #####"


def format_report(
    results: Iterable[ScenarioResult],
    config: ReportConfiguration | Mapping[str, Any] | None = None,
) -> list[list[str]]:
    """Format every input group of ``results`` into a list of lines.

    The configuration is resolved before anything is rendered, so a bad
    column name raises ConfigurationError without partial output.
    """
    config = _configuration(config)
    report = []
    for input_name, scenarios in group_by_input(results):
        block = []
        header = input_header(input_name)
        if header is not None:
            block.append(header)
        block.extend(format_scenarios(scenarios, config))
        report.append(block)
    return report


def format_scenarios(
    scenarios: Sequence[ScenarioResult],
    config: ReportConfiguration | Mapping[str, Any] | None = None,
) -> list[str]:
    """Header, ranked rows and the optional comparison and extended blocks."""
    config = _configuration(config)
    ranked = rank(scenarios)
    overrides = {Column.NAME: name_width(s.name for s in ranked)}
    units = resolve_units(
        ranked, (*DEFAULT_COLUMNS, *config.extended_columns), config.unit_scaling
    )

    lines = [render_header(DEFAULT_COLUMNS, overrides)]
    lines.extend(
        render_row(DEFAULT_COLUMNS, cells(s, DEFAULT_COLUMNS, units), overrides)
        for s in ranked
    )
    if config.comparison:
        lines.extend(comparison_report(ranked, units, overrides))
    if config.extended_columns:
        lines.extend(
            extended_options(ranked, config, overrides[Column.NAME], units)
        )
    return lines


def comparison_report(
    ranked: Sequence[ScenarioResult],
    units: UnitsByColumn,
    overrides: Mapping[Column, int],
) -> list[str]:
    """Reference line plus one "x slower" line per other scenario."""
    if len(ranked) < 2:
        return []
    columns = (Column.NAME, Column.IPS)
    reference, *others = ranked
    lines = [
        COMPARISON_BANNER,
        render_row(columns, cells(reference, columns, units), overrides),
    ]
    for scenario, slower in compare(reference, others):
        lines.append(render_row(
            columns,
            cells(scenario, columns, units),
            overrides,
            suffix=f" - {slower:.2f}x slower",
        ))
    return lines


def extended_options(
    scenarios: Sequence[ScenarioResult],
    config: ReportConfiguration | Mapping[str, Any] | None,
    label_width: int,
    units: UnitsByColumn | None = None,
) -> list[str]:
    """Banner, header and one row per scenario for the extended columns.

    Rows follow the order of ``scenarios``; ``format_scenarios`` passes
    them already ranked.
    """
    config = _configuration(config)
    columns = (Column.NAME, *config.extended_columns)
    if units is None:
        units = resolve_units(scenarios, columns, config.unit_scaling)
    overrides = {Column.NAME: label_width}
    lines = [EXTENDED_BANNER, render_header(columns, overrides, leading_newline=False)]
    lines.extend(
        render_row(columns, cells(s, columns, units), overrides)
        for s in scenarios
    )
    return lines


def _raw_values(scenario: ScenarioResult, column: Column) -> tuple[Any, ...]:
    getter = spec_for(column).value
    raw = getter(scenario.stats) if getter else None
    if raw is None:
        return ()
    if isinstance(raw, tuple):
        return raw
    return (raw,)


def resolve_units(
    scenarios: Sequence[ScenarioResult],
    columns: Iterable[Column],
    strategy: ScalingStrategy | str,
) -> UnitsByColumn:
    """One display unit per unit-scaled column, over every scenario given."""
    units: UnitsByColumn = {}
    for column in columns:
        kind = spec_for(column).kind
        if kind not in (QuantityKind.DURATION, QuantityKind.COUNT):
            continue
        values = [v for s in scenarios for v in _raw_values(s, column)]
        units[column] = scale_units(kind, values, strategy)
    return units


def cells(
    scenario: ScenarioResult,
    columns: Iterable[Column],
    units: UnitsByColumn,
) -> dict[Column, str]:
    """Formatted text for each of ``columns`` in ``scenario``."""
    out: dict[Column, str] = {}
    for column in columns:
        if column is Column.NAME:
            out[column] = scenario.name
            continue
        values = _raw_values(scenario, column)
        if not values:
            out[column] = MISSING
            continue
        kind = spec_for(column).kind
        if kind is QuantityKind.DEVIATION:
            texts = [format_deviation(v) for v in values]
        elif kind is QuantityKind.PLAIN:
            texts = [format_plain(v) for v in values]
        else:
            texts = [format_value(v, units[column]) for v in values]
        out[column] = ", ".join(texts)
    return out
