"""
Version command - displays rtbench version information
"""

import click

from rtbench.bench.runtime import detect_runtime
from rtbench.version import RTBENCH_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display rtbench version information.

    Args:
        verbose: If True, also show the package hash, build date and the
            runtime the suite would be labelled with
    """
    if verbose:
        click.echo(f"rtbench version {RTBENCH_VERSION.full_version()}")
        click.echo("\nDetailed version information:")
        click.echo(f"  Semantic Version: {RTBENCH_VERSION}")
        click.echo(f"  Build Date:       {RTBENCH_VERSION.date.isoformat()}")
        click.echo(f"  Package Hash:     {RTBENCH_VERSION.hash}")
        click.echo(f"  Runtime:          {detect_runtime().label()}")
    else:
        click.echo(f"rtbench {RTBENCH_VERSION}")
