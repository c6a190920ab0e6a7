"""Pydantic models for benchmark results and JSON/YAML export."""

from pydantic import BaseModel, ConfigDict, Field

from rtbench.models.constants import RuntimeKind

# ============================================================================
# Environment
# ============================================================================


class RuntimeInfo(BaseModel):
    """The Python implementation executing the suite.

    Purely a label for the report header; never feeds into a metric.
    """

    model_config = ConfigDict(frozen=True)

    kind: RuntimeKind = Field(..., description="Implementation (e.g., 'CPython', 'PyPy')")
    version: str = Field(..., description="Implementation version (e.g., '3.12.1')")

    def label(self) -> str:
        """Return the header label, e.g. 'CPython 3.12.1'."""
        return f"{self.kind} {self.version}"


class HostInfo(BaseModel):
    """Snapshot of the machine the suite ran on."""

    model_config = ConfigDict(frozen=True)

    platform: str = Field(..., description="Platform string (e.g., 'Linux-6.5-x86_64')")
    machine: str = Field(..., description="Machine architecture (e.g., 'x86_64', 'arm64')")
    physical_cores: int | None = Field(None, ge=1, description="Physical CPU cores")
    logical_cores: int | None = Field(None, ge=1, description="Logical CPU cores")
    total_memory_bytes: int | None = Field(None, ge=0, description="Total RAM in bytes")


# ============================================================================
# Results
# ============================================================================


class BenchmarkResult(BaseModel):
    """Outcome of one measured workload."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Workload name as registered")
    elapsed_ms: float = Field(..., gt=0, description="Measured run time in milliseconds")
    ops_per_second: int = Field(
        ..., ge=0, description="Declared operation count divided by elapsed seconds"
    )
    logical_op_count: float = Field(
        ..., gt=0, description="Declared operation count used for the rate"
    )
    is_async: bool = Field(False, description="True for the gathered async workload")


class RunMetadata(BaseModel):
    """Context recorded alongside a run."""

    timestamp_start: str = Field(..., description="UTC ISO timestamp when the run began")
    timestamp_end: str | None = Field(None, description="UTC ISO timestamp when emitted")
    rtbench_version: str = Field(..., description="rtbench version string")
    runtime: RuntimeInfo
    host: HostInfo | None = None


class RunExport(BaseModel):
    """Root document written by ``rtbench -o results.json``."""

    metadata: RunMetadata
    results: list[BenchmarkResult] = Field(
        default_factory=list, description="Synchronous results in registry order"
    )
    async_result: BenchmarkResult | None = Field(
        None, description="Result of the async workload, if it ran"
    )
    total_elapsed_ms: float = Field(
        ..., ge=0, description="Sum of synchronous elapsed times (async excluded)"
    )
