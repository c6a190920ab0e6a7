"""Benchmark harness for rtbench.

This module provides:
- Workload / AsyncWorkload: Descriptors for measured operations
- WorkloadRegistry: Ordered registration with validation
- BenchmarkRunner: Warm-up, single timed call, throughput, streamed rows
- RunReport: Result collection with JSON/YAML/text emission
- detect_runtime: One-shot interpreter identification for the header

Quick Start:
    from rtbench.bench import BenchmarkRunner, ReportWriter, detect_runtime
    from rtbench.bench.workloads import build_default_registry

    runner = BenchmarkRunner(ReportWriter(detect_runtime()))
    report = runner.run(build_default_registry())
    report.emit_json("results.json")
"""

from rtbench.bench.base import AsyncWorkload, Workload
from rtbench.bench.registry import (
    InvalidWorkloadError,
    WorkloadNameCollisionError,
    WorkloadNotFoundError,
    WorkloadRegistry,
    WorkloadRegistryError,
)
from rtbench.bench.report import ReportWriter
from rtbench.bench.results import OutputFormat, RunReport
from rtbench.bench.runner import (
    BenchmarkError,
    BenchmarkRunner,
    WorkloadFailedError,
    compute_ops_per_second,
)
from rtbench.bench.runtime import collect_host_info, detect_runtime

__all__ = [
    "AsyncWorkload",
    # Runner
    "BenchmarkError",
    "BenchmarkRunner",
    "InvalidWorkloadError",
    "OutputFormat",
    "ReportWriter",
    "RunReport",
    # Base
    "Workload",
    "WorkloadFailedError",
    "WorkloadNameCollisionError",
    "WorkloadNotFoundError",
    # Registry
    "WorkloadRegistry",
    "WorkloadRegistryError",
    "collect_host_info",
    "compute_ops_per_second",
    "detect_runtime",
]
