"""Constants for rtbench models, report layout and workloads."""

from enum import StrEnum


class RuntimeKind(StrEnum):
    """Python implementations rtbench knows how to label."""

    CPYTHON = "CPython"
    PYPY = "PyPy"
    GRAALPY = "GraalPy"
    IRONPYTHON = "IronPython"
    JYTHON = "Jython"
    UNKNOWN = "unknown"


# Iteration counts
DEFAULT_ITERATIONS = 1_000_000  # Base count; workloads scale it by 1, 1/10 or 1/100
MIN_ITERATIONS = 100  # Smallest base count that keeps every scaled count >= 1
ASYNC_OPERATION_COUNT = 10_000  # Coroutines gathered by the async workload

# Report layout
RULE_CHAR = "═"
RULE_WIDTH = 60
NAME_WIDTH = 25
ELAPSED_WIDTH = 10
OPS_WIDTH = 15
REPORT_TITLE = "Performance Stress Test"
ASYNC_LABEL = "Async/Gather"
ASYNC_ANNOUNCEMENT = "Running async operations test..."

# Environment variables
ENV_LOG_LEVEL = "RTBENCH_LOG_LEVEL"
ENV_ITERATIONS = "RTBENCH_ITERATIONS"
DEFAULT_LOG_LEVEL = "WARNING"
