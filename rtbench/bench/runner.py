"""Benchmark runner: warm-up, measure, derive throughput, report.

Every synchronous workload is called twice: once to warm up (result and
timing thrown away) and once inside the timing window. The async workload
runs once afterwards, without warm-up, inside its own event loop.

Usage:
    from rtbench.bench.report import ReportWriter
    from rtbench.bench.runner import BenchmarkRunner
    from rtbench.bench.runtime import detect_runtime
    from rtbench.bench.workloads import build_default_registry

    runner = BenchmarkRunner(ReportWriter(detect_runtime()))
    report = runner.run(build_default_registry())
"""

import asyncio
import logging
import time
from collections.abc import Callable

from rtbench.bench.base import AsyncWorkload, Workload
from rtbench.bench.registry import WorkloadRegistry
from rtbench.bench.report import ReportWriter
from rtbench.bench.results import RunReport
from rtbench.models.bench_models import BenchmarkResult, HostInfo


class BenchmarkError(Exception):
    """Base exception for failures while running the suite."""

    pass


class WorkloadFailedError(BenchmarkError):
    """Raised when a workload raises; the original exception is chained."""

    def __init__(self, name: str, phase: str) -> None:
        self.name = name
        self.phase = phase
        super().__init__(f"Workload '{name}' failed during {phase} run")


def compute_ops_per_second(logical_op_count: int | float, elapsed_ms: float) -> int:
    """Convert a declared operation count and elapsed time into ops/sec.

    Args:
        logical_op_count: Declared number of operations.
        elapsed_ms: Measured time in milliseconds.

    Returns:
        Operations per second, rounded to the nearest integer.

    Raises:
        ValueError: If elapsed_ms is zero or negative.
    """
    if elapsed_ms <= 0:
        raise ValueError(f"elapsed_ms must be positive, got {elapsed_ms}")

    return round(logical_op_count / (elapsed_ms / 1000))


def _clock_resolution_ms() -> float:
    return time.get_clock_info("perf_counter").resolution * 1000


class BenchmarkRunner:
    """Runs a registry's workloads in order and streams the report.

    Any exception from a workload stops the run at that workload; nothing is
    retried and no row is written for it.

    Args:
        writer: Receives the header, one row per result and the footer.
        clock: Monotonic clock returning seconds. Defaults to perf_counter.
        min_elapsed_ms: Floor for a measured interval, for clocks too coarse
            to see a fast workload. Defaults to the perf_counter resolution.

    Example:
        >>> runner = BenchmarkRunner(ReportWriter(detect_runtime()))
        >>> report = runner.run(registry)
        >>> report.total_elapsed_ms
    """

    def __init__(
        self,
        writer: ReportWriter,
        clock: Callable[[], float] = time.perf_counter,
        min_elapsed_ms: float | None = None,
    ) -> None:
        self.writer = writer
        self._clock = clock
        self._min_elapsed_ms = (
            _clock_resolution_ms() if min_elapsed_ms is None else min_elapsed_ms
        )

    @property
    def logger(self) -> logging.Logger:
        from rtbench.utils.logger import Logger

        return Logger.get("bench.runner")

    def run(self, registry: WorkloadRegistry, host: HostInfo | None = None) -> RunReport:
        """Run every workload in the registry and return the report.

        Args:
            registry: Workloads to run, in registration order.
            host: Optional host snapshot stored with the report.

        Returns:
            RunReport with one result per synchronous workload, plus the
            async result when the registry has an async workload.

        Raises:
            WorkloadFailedError: As soon as any workload raises.
        """
        report = RunReport(runtime=self.writer.runtime, host=host)

        self.writer.header()

        for workload in registry:
            result = self.measure(workload)
            report.add_result(result)
            self.writer.row(result)

        async_workload = registry.async_workload
        if async_workload is not None:
            self.writer.async_banner()
            result = self.run_async(async_workload)
            report.set_async_result(result)
            self.writer.row(result)

        self.writer.footer(report.total_elapsed_ms)
        return report

    def measure(self, workload: Workload) -> BenchmarkResult:
        """Warm up once, then time a single call.

        Raises:
            WorkloadFailedError: If either call raises.
        """
        self.logger.debug(f"Warming up {workload.name}")
        try:
            workload()
        except Exception as e:
            raise WorkloadFailedError(workload.name, "warm-up") from e

        self.logger.debug(f"Measuring {workload.name}")
        try:
            start = self._clock()
            workload()
            end = self._clock()
        except Exception as e:
            raise WorkloadFailedError(workload.name, "measured") from e

        return self._result(workload.name, workload.logical_op_count, start, end)

    def run_async(self, workload: AsyncWorkload) -> BenchmarkResult:
        """Time the async workload once in a fresh event loop.

        Raises:
            WorkloadFailedError: If the awaited operation raises.
        """
        self.logger.debug(f"Measuring {workload.name}")
        return asyncio.run(self._measure_async(workload))

    async def _measure_async(self, workload: AsyncWorkload) -> BenchmarkResult:
        try:
            start = self._clock()
            await workload()
            end = self._clock()
        except Exception as e:
            raise WorkloadFailedError(workload.name, "async") from e

        return self._result(
            workload.name, workload.logical_op_count, start, end, is_async=True
        )

    def _result(
        self,
        name: str,
        logical_op_count: int | float,
        start: float,
        end: float,
        is_async: bool = False,
    ) -> BenchmarkResult:
        elapsed_ms = max((end - start) * 1000, self._min_elapsed_ms)
        ops_per_second = compute_ops_per_second(logical_op_count, elapsed_ms)

        self.logger.debug(f"{name}: {elapsed_ms:.4f} ms, {ops_per_second} ops/sec")

        return BenchmarkResult(
            name=name,
            elapsed_ms=elapsed_ms,
            ops_per_second=ops_per_second,
            logical_op_count=logical_op_count,
            is_async=is_async,
        )
