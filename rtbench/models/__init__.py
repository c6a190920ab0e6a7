"""Pydantic models for structured output and configuration."""

from rtbench.models.bench_models import (
    BenchmarkResult,
    HostInfo,
    RunExport,
    RunMetadata,
    RuntimeInfo,
)
from rtbench.models.config_models import RunConfig, RunDefaults
from rtbench.models.constants import RuntimeKind

__all__ = [
    "BenchmarkResult",
    "HostInfo",
    "RunConfig",
    "RunDefaults",
    "RunExport",
    "RunMetadata",
    "RuntimeInfo",
    "RuntimeKind",
]
