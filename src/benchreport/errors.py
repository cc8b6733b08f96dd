"""Exceptions raised by the report formatter.

Everything here is a programmer or configuration error surfaced
synchronously to the caller.  Formatting is deterministic, so nothing
is retried.
"""
from __future__ import annotations


class ReportError(Exception):
    """Base class for all formatter errors."""


class ConfigurationError(ReportError, ValueError):
    """Raised when a column or scaling strategy is not recognized."""

    def __init__(self, column: object, message: str | None = None) -> None:
        self.column = column
        super().__init__(message or f"Unsupported column: {column!r}")


class DivisionError(ReportError, ZeroDivisionError):
    """Raised when a slowdown ratio is requested against zero throughput."""

    def __init__(self, scenario_name: str) -> None:
        self.scenario_name = scenario_name
        super().__init__(
            f"Cannot compare against {scenario_name!r}: its ips is 0"
        )
