"""Models for the optional YAML run configuration."""

from pydantic import BaseModel, ConfigDict, Field

from rtbench.models.constants import MIN_ITERATIONS


class RunDefaults(BaseModel):
    """Defaults applied when the CLI does not override them."""

    model_config = ConfigDict(extra="forbid")

    iterations: int | None = Field(
        None,
        ge=MIN_ITERATIONS,
        description="Base iteration count (workloads run N, N/10 or N/100)",
    )


class RunConfig(BaseModel):
    """Root of a ``--config`` file.

    Example:
        defaults:
          iterations: 100000
        tests:
          - JSON Stringify/Parse
          - Math Operations
        skip_async: false
    """

    model_config = ConfigDict(extra="forbid")

    defaults: RunDefaults = Field(default_factory=RunDefaults)
    tests: list[str] = Field(
        default_factory=list, description="Workload names to run; empty means all"
    )
    skip_async: bool = Field(False, description="Leave out the async workload")
