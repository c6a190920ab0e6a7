"""Tests for fixed-width report formatting."""

from io import StringIO

from rtbench.bench.report import (
    ReportWriter,
    format_row,
    format_title,
    format_total,
    rule,
)
from rtbench.models.bench_models import BenchmarkResult, RuntimeInfo
from rtbench.models.constants import RuntimeKind

RUNTIME = RuntimeInfo(kind=RuntimeKind.PYPY, version="7.3.15 (Python 3.10.13)")


def test_rule():
    """Test the rule is sixty separator characters."""
    assert rule() == "═" * 60


def test_format_row_layout():
    """Test column widths and decimal formatting."""
    row = format_row("noop", 1.5, 666667)

    expected = (
        "noop".ljust(25) + " " + "1.50".rjust(10) + " ms  " + "666667".rjust(15) + " ops/sec"
    )
    assert row == expected
    assert row.index("ms") == 37


def test_format_row_rounds_elapsed():
    """Test elapsed time is shown with two decimals."""
    assert " 1234.57 ms" in format_row("x", 1234.567, 1)
    assert "      0.00 ms" in format_row("x", 0.001, 1)


def test_format_row_truncates_long_names():
    """Test that long names keep the numeric columns aligned."""
    long_name = "A workload name that is far too long"
    row = format_row(long_name, 2.0, 10)

    assert row.startswith(long_name[:25] + " ")
    assert long_name[:26] not in row
    assert len(row) == len(format_row("short", 2.0, 10))


def test_format_row_wide_numbers_are_not_cut():
    """Test numbers wider than their column are printed in full."""
    row = format_row("big", 12345678.9, 12345678901234567)
    assert "12345678.90 ms" in row
    assert "12345678901234567 ops/sec" in row


def test_title_and_total():
    """Test header title and footer total lines."""
    assert format_title(RUNTIME) == "  Performance Stress Test - PyPy 7.3.15 (Python 3.10.13)"
    assert format_total(4.0) == "  Total Runtime: 4.00 ms"


def test_writer_streams_lines():
    """Test the writer emits header, rows, banner and footer in order."""
    stream = StringIO()
    writer = ReportWriter(RUNTIME, stream=stream)

    writer.header()
    writer.row(
        BenchmarkResult(name="noop", elapsed_ms=1.5, ops_per_second=666667, logical_op_count=1000)
    )
    assert stream.getvalue().splitlines()[-1].startswith("noop")

    writer.async_banner()
    writer.footer(1.5)

    lines = stream.getvalue().splitlines()
    assert lines == [
        rule(),
        format_title(RUNTIME),
        rule(),
        "",
        format_row("noop", 1.5, 666667),
        "",
        "Running async operations test...",
        "",
        rule(),
        "  Total Runtime: 1.50 ms",
        rule(),
    ]
