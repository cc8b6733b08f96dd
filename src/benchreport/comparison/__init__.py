"""Scenario ranking and relative slowdown."""

from benchreport.comparison.ranking import compare, rank, slowdown

__all__ = ["compare", "rank", "slowdown"]
