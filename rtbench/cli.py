#!/usr/bin/env python3
"""rtbench CLI - Command-line interface for rtbench."""

import click

from rtbench.models.constants import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL, MIN_ITERATIONS
from rtbench.utils.env import get_env
from rtbench.utils.logger import Logger


@click.group(invoke_without_command=True)
@click.option(
    "--iterations",
    "-n",
    type=click.IntRange(min=MIN_ITERATIONS),
    default=None,
    help="Base iteration count (default: $RTBENCH_ITERATIONS or 1000000)",
)
@click.option(
    "--test",
    "-t",
    "tests",
    multiple=True,
    help="Run only the named workload(s), e.g. 'Math Operations'. Repeatable.",
)
@click.option(
    "--skip-async",
    is_flag=True,
    help="Leave out the async workload",
)
@click.option(
    "--list",
    "-l",
    "list_only",
    is_flag=True,
    help="List registered workloads and exit",
)
@click.option(
    "--config",
    type=click.Path(exists=True),
    default=None,
    help="YAML config file with defaults and a workload selection",
)
@click.option(
    "--output",
    "-o",
    "outputs",
    multiple=True,
    help="Also write results to file(s) - format from suffix (.json/.yaml). Repeatable.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Verbose output",
)
@click.pass_context
def rtbench(ctx, iterations, tests, skip_async, list_only, config, outputs, verbose):
    r"""Compare the speed of common Python runtime operations.

    Running with no arguments executes the whole suite and prints the report.

    \b
    Examples:
      rtbench                          # Run every workload
      rtbench --list                   # List workloads
      rtbench -n 100000                # Quicker run
      rtbench -t "Function Calls"      # Run one workload
      rtbench -o results.json          # Save results
    """
    if not Logger.is_configured():
        level = get_env(ENV_LOG_LEVEL, default=DEFAULT_LOG_LEVEL)
        try:
            Logger.configure(level=level, output="stderr", timestamps=True)
        except ValueError as e:
            raise click.ClickException(f"Invalid {ENV_LOG_LEVEL}: {level}") from e

    if verbose:
        Logger.set_level("DEBUG")

    if ctx.invoked_subcommand is not None:
        return

    from rtbench.commands.run_cmd import run_suite

    run_suite(
        iterations=iterations,
        tests=tests,
        skip_async=skip_async,
        list_only=list_only,
        config=config,
        outputs=outputs,
        verbose=verbose,
    )


@rtbench.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display rtbench version information."""
    from rtbench.commands.version_cmd import run_version

    run_version(verbose=verbose)


if __name__ == "__main__":
    rtbench()
