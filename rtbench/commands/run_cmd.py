"""Run command - executes the benchmark suite and prints the report.

CLI Examples:
    rtbench                              # Run the full suite
    rtbench --list                       # List registered workloads
    rtbench -n 100000                    # Smaller base iteration count
    rtbench -t "Math Operations"         # Run one workload (plus async)
    rtbench --skip-async                 # Synchronous workloads only
    rtbench -o results.json              # Also save results as JSON
    rtbench --config suite.yaml          # Use config file
"""

import sys
import textwrap
from pathlib import Path

import click
import yaml
from pydantic import ValidationError

from rtbench.bench import (
    BenchmarkRunner,
    OutputFormat,
    ReportWriter,
    WorkloadFailedError,
    WorkloadNotFoundError,
    WorkloadRegistry,
    collect_host_info,
    detect_runtime,
)
from rtbench.bench.workloads import build_default_registry
from rtbench.models.config_models import RunConfig
from rtbench.models.constants import (
    DEFAULT_ITERATIONS,
    ENV_ITERATIONS,
    MIN_ITERATIONS,
)
from rtbench.utils.env import EnvVarTypeError, get_env
from rtbench.utils.logger import Logger


def load_config(config_path: str) -> RunConfig:
    """Load run configuration from a YAML file.

    Raises:
        click.ClickException: If the file is missing, not YAML, or invalid.
    """
    path = Path(config_path)
    if not path.exists():
        raise click.ClickException(f"Config file not found: {config_path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise click.ClickException(f"Error parsing config: {e}") from e

    if data is None:
        return RunConfig()
    if not isinstance(data, dict):
        raise click.ClickException("Config must be a YAML dictionary")

    try:
        return RunConfig.model_validate(data)
    except ValidationError as e:
        raise click.ClickException(f"Invalid config {config_path}:\n{e}") from e


def get_output_format(output: str) -> OutputFormat:
    """Pick an export format from the file suffix."""
    suffix = Path(output).suffix.lower()
    if suffix == ".json":
        return OutputFormat.JSON
    elif suffix in (".yaml", ".yml"):
        return OutputFormat.YAML
    return OutputFormat.TEXT


def resolve_iterations(cli_value: int | None, config: RunConfig) -> int:
    """Pick the base iteration count: CLI, then config, then env, then default.

    Raises:
        click.ClickException: If RTBENCH_ITERATIONS is not a valid count.
    """
    if cli_value is not None:
        return cli_value
    if config.defaults.iterations is not None:
        return config.defaults.iterations

    try:
        iterations = get_env(ENV_ITERATIONS, default=DEFAULT_ITERATIONS, as_type=int, log=True)
    except EnvVarTypeError as e:
        raise click.ClickException(str(e)) from e

    if iterations < MIN_ITERATIONS:
        raise click.ClickException(
            f"{ENV_ITERATIONS} must be >= {MIN_ITERATIONS}, got {iterations}"
        )
    return iterations


def list_workloads(registry: WorkloadRegistry, verbose: bool = False) -> None:
    """List registered workloads in execution order."""
    click.echo("\nWorkloads (execution order)\n")
    click.echo("-" * 60)

    for workload in registry:
        click.echo(f"  {workload.name:<25} {workload.logical_op_count:>12} ops")
        if verbose and workload.description:
            click.echo(
                textwrap.fill(
                    workload.description,
                    width=70,
                    initial_indent="      ",
                    subsequent_indent="      ",
                )
            )

    async_workload = registry.async_workload
    if async_workload is not None:
        click.echo(
            f"  {async_workload.name:<25} {async_workload.logical_op_count:>12} ops"
            "  (async, not in total)"
        )

    async_count = 0 if async_workload is None else 1
    click.echo("-" * 60)
    click.echo(f"\nTotal: {len(registry)} workloads + {async_count} async")


def run_suite(
    iterations: int | None,
    tests: tuple[str, ...],
    skip_async: bool,
    list_only: bool,
    config: str | None,
    outputs: tuple[str, ...],
    verbose: bool,
) -> None:
    """Run the benchmark suite based on CLI arguments."""
    log = Logger.get("run")

    run_config = load_config(config) if config else RunConfig()
    base_iterations = resolve_iterations(iterations, run_config)
    log.info(f"Base iteration count: {base_iterations}")

    registry = build_default_registry(base_iterations)

    selected = tests or tuple(run_config.tests)
    if selected:
        try:
            registry = registry.select(selected)
        except WorkloadNotFoundError as e:
            raise click.ClickException(
                f"{e}. Use 'rtbench --list' to see available workloads."
            ) from e

    if skip_async or run_config.skip_async:
        registry = registry.without_async()

    if list_only:
        list_workloads(registry, verbose)
        return

    runtime = detect_runtime()
    log.info(f"Detected runtime: {runtime.label()}")

    runner = BenchmarkRunner(ReportWriter(runtime))
    host = collect_host_info() if outputs else None

    try:
        report = runner.run(registry, host=host)
    except WorkloadFailedError as e:
        log.error(f"{e}: {e.__cause__!r}")
        log.debug("Workload traceback", exc_info=e.__cause__)
        sys.exit(1)

    for out_path in outputs:
        report.emit(out_path, get_output_format(out_path))
        click.echo(f"Results saved to: {out_path}", err=True)
