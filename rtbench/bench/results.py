"""Run report collection and emission.

Supports multiple output formats: JSON, YAML, and the fixed-width text report.

Usage:
    from rtbench.bench.results import RunReport, OutputFormat

    report = RunReport(runtime=detect_runtime())
    report.add_result(result)
    report.set_async_result(async_result)

    report.emit("results.json", OutputFormat.JSON)
    report.emit(sys.stdout, OutputFormat.TEXT)
"""

import json
import sys
from datetime import UTC, datetime
from enum import Enum
from io import StringIO
from pathlib import Path
from typing import Any, TextIO

import yaml

from rtbench.bench.report import format_row, format_title, format_total, rule
from rtbench.models.bench_models import (
    BenchmarkResult,
    HostInfo,
    RunExport,
    RunMetadata,
    RuntimeInfo,
)
from rtbench.models.constants import ASYNC_ANNOUNCEMENT


class OutputFormat(Enum):
    """Supported output formats for run reports."""

    JSON = "json"
    YAML = "yaml"
    TEXT = "text"  # Same layout as the streamed console report


class RunReport:
    """Results of one run of the suite.

    Holds the synchronous results in execution order, the async result kept
    apart from them, and the total over the synchronous results only.

    Example:
        >>> report = RunReport(runtime=RuntimeInfo(kind="CPython", version="3.12.1"))
        >>> report.add_result(result)
        >>> report.total_elapsed_ms
        12.5
    """

    def __init__(self, runtime: RuntimeInfo, host: HostInfo | None = None) -> None:
        self.runtime = runtime
        self.host = host
        self._results: list[BenchmarkResult] = []
        self._async_result: BenchmarkResult | None = None
        self._timestamp_start = datetime.now(UTC).isoformat()
        self._timestamp_end: str | None = None

    def add_result(self, result: BenchmarkResult) -> None:
        """Append a synchronous result."""
        self._results.append(result)

    def set_async_result(self, result: BenchmarkResult) -> None:
        """Record the async workload's result."""
        self._async_result = result

    def finalize(self) -> None:
        """Mark the report as complete, setting the end timestamp."""
        self._timestamp_end = datetime.now(UTC).isoformat()

    @property
    def results(self) -> list[BenchmarkResult]:
        """Synchronous results in execution order."""
        return list(self._results)

    @property
    def async_result(self) -> BenchmarkResult | None:
        return self._async_result

    @property
    def rows(self) -> list[BenchmarkResult]:
        """Every result in report order, async last."""
        rows = list(self._results)
        if self._async_result is not None:
            rows.append(self._async_result)
        return rows

    @property
    def total_elapsed_ms(self) -> float:
        """Sum of synchronous elapsed times as printed (2 decimals).

        Summing the displayed values keeps the footer equal to the sum of the
        rows above it. The async result is not counted.
        """
        return sum(round(result.elapsed_ms, 2) for result in self._results)

    def to_export(self) -> RunExport:
        """Build the serializable export model."""
        from rtbench import __version__

        return RunExport(
            metadata=RunMetadata(
                timestamp_start=self._timestamp_start,
                timestamp_end=self._timestamp_end,
                rtbench_version=__version__,
                runtime=self.runtime,
                host=self.host,
            ),
            results=self._results,
            async_result=self._async_result,
            total_elapsed_ms=self.total_elapsed_ms,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert the report to plain JSON-compatible data."""
        return self.to_export().model_dump(mode="json")

    # -------------------------------------------------------------------------
    # Emission Methods
    # -------------------------------------------------------------------------

    def emit(
        self,
        output: str | Path | TextIO,
        format: OutputFormat = OutputFormat.JSON,
        indent: int = 2,
    ) -> None:
        """Emit the report to a file or stream.

        Args:
            output: File path or file-like object (e.g., sys.stdout).
            format: Output format (JSON, YAML, TEXT).
            indent: Indentation level for JSON/YAML.
        """
        self.finalize()

        if format == OutputFormat.JSON:
            content = self._to_json(indent)
        elif format == OutputFormat.YAML:
            content = self._to_yaml(indent)
        elif format == OutputFormat.TEXT:
            content = self._to_text()
        else:
            raise ValueError(f"Unknown format: {format}")

        self._write_output(output, content)

    def _to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False) + "\n"

    def _to_yaml(self, indent: int = 2) -> str:
        result: str = yaml.safe_dump(
            self.to_dict(), indent=indent, default_flow_style=False, sort_keys=False
        )
        return result

    def _to_text(self) -> str:
        """Render the same report the runner streams to the console."""
        output = StringIO()

        output.write(rule() + "\n")
        output.write(format_title(self.runtime) + "\n")
        output.write(rule() + "\n\n")

        for result in self._results:
            output.write(
                format_row(result.name, result.elapsed_ms, result.ops_per_second) + "\n"
            )

        if self._async_result is not None:
            output.write("\n" + ASYNC_ANNOUNCEMENT + "\n")
            result = self._async_result
            output.write(
                format_row(result.name, result.elapsed_ms, result.ops_per_second) + "\n"
            )

        output.write("\n" + rule() + "\n")
        output.write(format_total(self.total_elapsed_ms) + "\n")
        output.write(rule() + "\n")
        return output.getvalue()

    def _write_output(self, output: str | Path | TextIO, content: str) -> None:
        if isinstance(output, str | Path):
            Path(output).write_text(content, encoding="utf-8")
        else:
            output.write(content)
            if output is not sys.stdout and output is not sys.stderr:
                output.flush()

    # -------------------------------------------------------------------------
    # Convenience Methods
    # -------------------------------------------------------------------------

    def emit_json(self, path: str | Path) -> None:
        self.emit(path, OutputFormat.JSON)

    def emit_yaml(self, path: str | Path) -> None:
        self.emit(path, OutputFormat.YAML)

    def __len__(self) -> int:
        """Return number of rows, async included."""
        return len(self.rows)

    def __contains__(self, name: object) -> bool:
        return any(result.name == name for result in self.rows)
