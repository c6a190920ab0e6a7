"""Fixed-width report rendering.

The line layout is consumed by comparison scripts, so widths and labels are
constants in ``rtbench.models.constants`` and must not drift:

    ════════════════════════════════════════════════════════════
      Performance Stress Test - CPython 3.12.1
    ════════════════════════════════════════════════════════════

    JSON Stringify/Parse           1234.56 ms           810000 ops/sec
    ...

    Running async operations test...
    Async/Gather                     12.34 ms           810373 ops/sec

    ════════════════════════════════════════════════════════════
      Total Runtime: 5678.90 ms
    ════════════════════════════════════════════════════════════
"""

from typing import TextIO

import click

from rtbench.models.bench_models import BenchmarkResult, RuntimeInfo
from rtbench.models.constants import (
    ASYNC_ANNOUNCEMENT,
    ELAPSED_WIDTH,
    NAME_WIDTH,
    OPS_WIDTH,
    REPORT_TITLE,
    RULE_CHAR,
    RULE_WIDTH,
)


def rule() -> str:
    """Return the horizontal rule line."""
    return RULE_CHAR * RULE_WIDTH


def format_row(name: str, elapsed_ms: float, ops_per_second: int) -> str:
    """Format one result row.

    Names longer than the name column are cut so the numeric columns stay
    aligned.
    """
    label = name[:NAME_WIDTH]
    return (
        f"{label:<{NAME_WIDTH}} {elapsed_ms:>{ELAPSED_WIDTH}.2f} ms  "
        f"{ops_per_second:>{OPS_WIDTH}} ops/sec"
    )


def format_total(total_ms: float) -> str:
    """Format the footer's total line."""
    return f"  Total Runtime: {total_ms:.2f} ms"


def format_title(runtime: RuntimeInfo) -> str:
    """Format the header's title line."""
    return f"  {REPORT_TITLE} - {runtime.label()}"


class ReportWriter:
    """Writes report lines to a stream as soon as they are known.

    Each call emits and flushes complete lines, so a row appears the moment
    its workload finishes rather than when the whole run is done.

    Args:
        runtime: Runtime label shown in the header.
        stream: Destination; None means the current stdout.
    """

    def __init__(self, runtime: RuntimeInfo, stream: TextIO | None = None) -> None:
        self.runtime = runtime
        self._stream = stream

    def _line(self, text: str = "") -> None:
        click.echo(text, file=self._stream)

    def header(self) -> None:
        self._line(rule())
        self._line(format_title(self.runtime))
        self._line(rule())
        self._line()

    def row(self, result: BenchmarkResult) -> None:
        self._line(format_row(result.name, result.elapsed_ms, result.ops_per_second))

    def async_banner(self) -> None:
        self._line()
        self._line(ASYNC_ANNOUNCEMENT)

    def footer(self, total_ms: float) -> None:
        self._line()
        self._line(rule())
        self._line(format_total(total_ms))
        self._line(rule())
