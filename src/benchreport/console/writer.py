"""Write a formatted report to the console.

Formatting itself never touches a stream; this module does.  A failure
while writing is logged and returned as a ``WriteOutcome`` instead of
being raised.
"""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, TextIO

from benchreport.console.formatter import format_report
from benchreport.domain.config import ReportConfiguration
from benchreport.domain.scenario import ScenarioResult

log = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown Error"


@dataclass(frozen=True, slots=True)
class WriteOutcome:
    ok: bool
    error: str | None = None


def join_output(output: Iterable[Any]) -> str:
    """Flatten nested blocks of lines into one string."""
    if isinstance(output, str):
        return output
    return "".join(join_output(part) for part in output)


def write(output: Iterable[Any], stream: TextIO | None = None) -> WriteOutcome:
    """Write ``output`` (a string or nested lists of strings) to ``stream``."""
    target = stream if stream is not None else sys.stdout
    try:
        target.write(join_output(output))
        target.flush()
    except Exception:
        log.exception("Failed to write report")
        return WriteOutcome(ok=False, error=UNKNOWN_ERROR)
    return WriteOutcome(ok=True)


def output(
    results: Iterable[ScenarioResult],
    config: ReportConfiguration | Mapping[str, Any] | None = None,
    stream: TextIO | None = None,
) -> WriteOutcome:
    """Format ``results`` and write them to ``stream`` (stdout by default)."""
    return write(format_report(results, config), stream)
