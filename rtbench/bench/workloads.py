"""Default workload suite.

Each workload builds and throws away its own data, so no state leaks from one
to the next. The bodies are small and interchangeable; what matters is the
declared operation count registered next to them.
"""

import asyncio
import json
import math
import re
from functools import partial, reduce

from rtbench.bench.registry import WorkloadRegistry
from rtbench.models.constants import (
    ASYNC_LABEL,
    ASYNC_OPERATION_COUNT,
    DEFAULT_ITERATIONS,
    MIN_ITERATIONS,
)

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
DIGITS_PATTERN = re.compile(r"[0-9]+")
SAMPLE_EMAIL = "test.email123@example.com"


class _Record:
    __slots__ = ("a", "b", "c", "d", "e")

    def __init__(self, a: int, b: int, c: int, d: int, e: int) -> None:
        self.a = a
        self.b = b
        self.c = c
        self.d = d
        self.e = e


def json_round_trip(count: int) -> None:
    """Serialize a small nested document to JSON and parse it back."""
    data = {"name": "test", "value": 123, "nested": {"array": [1, 2, 3, 4, 5]}}
    for _ in range(count):
        json.loads(json.dumps(data))


def string_manipulation(count: int) -> None:
    """Repeat, concatenate, split, join and upper-case short strings."""
    for _ in range(count):
        result = "Hello" * 10 + " " + "World" * 10
        "-".join(result.split(" ")).upper()


def list_pipeline(count: int) -> None:
    """Map, filter and reduce over a 1000-element list."""
    for _ in range(count):
        values = list(range(1000))
        doubled = map(lambda x: x * 2, values)
        multiples = filter(lambda x: x % 4 == 0, doubled)
        reduce(lambda a, b: a + b, multiples, 0)


def object_attributes(count: int) -> None:
    """Create a five-field object and sum its attributes."""
    for _ in range(count):
        record = _Record(1, 2, 3, 4, 5)
        record.a + record.b + record.c + record.d + record.e


def math_operations(count: int) -> float:
    """Accumulate sqrt, pow, sin and cos over a range."""
    total = 0.0
    for i in range(count):
        total += math.sqrt(i) + math.pow(i, 2) + math.sin(i) + math.cos(i)
    return total


def regex_matching(count: int) -> None:
    """Validate an email address and extract its digit runs."""
    for _ in range(count):
        EMAIL_PATTERN.match(SAMPLE_EMAIL)
        DIGITS_PATTERN.findall(SAMPLE_EMAIL)


def function_calls(count: int) -> int:
    """Call a two-argument lambda in a tight loop."""
    add = lambda a, b: a + b  # noqa: E731
    result = 0
    for i in range(count):
        result = add(result, i)
    return result


def buffer_writes(count: int) -> None:
    """Fill a 1000-byte bytearray one index at a time."""
    for _ in range(count):
        buffer = bytearray(1000)
        for j in range(len(buffer)):
            buffer[j] = j % 256


def set_dict_operations(count: int) -> None:
    """Populate a set and a dict with 100 keys, then look up every key in both."""
    for _ in range(count):
        seen = set()
        doubled = {}
        for j in range(100):
            seen.add(j)
            doubled[j] = j * 2
        50 in seen
        doubled.get(50)


async def _resolve(value: int) -> int:
    return value * 2


async def gather_batch(values: range | list[int]) -> list[int]:
    """Start one coroutine per value and await them as a single batch.

    Every coroutine is created before any is awaited; ``asyncio.gather``
    completes once all have finished and raises the first exception if one
    fails.
    """
    return await asyncio.gather(*(_resolve(value) for value in values))


# (name, body, divisor applied to the base iteration count)
DEFAULT_WORKLOADS = (
    ("JSON Stringify/Parse", json_round_trip, 1),
    ("String Manipulation", string_manipulation, 10),
    ("List Operations", list_pipeline, 100),
    ("Object Creation", object_attributes, 1),
    ("Math Operations", math_operations, 1),
    ("RegExp Operations", regex_matching, 10),
    ("Function Calls", function_calls, 1),
    ("Buffer/Bytearray", buffer_writes, 100),
    ("Set/Dict Operations", set_dict_operations, 100),
)


def build_default_registry(
    iterations: int = DEFAULT_ITERATIONS,
    async_count: int = ASYNC_OPERATION_COUNT,
) -> WorkloadRegistry:
    """Build the standard suite.

    Args:
        iterations: Base iteration count. Each workload runs ``iterations``
            divided by its divisor and declares that same number as its
            logical operation count.
        async_count: Number of coroutines the async workload gathers.

    Returns:
        Registry with the nine synchronous workloads and the async workload.

    Raises:
        ValueError: If iterations is below MIN_ITERATIONS.
    """
    if iterations < MIN_ITERATIONS:
        raise ValueError(f"iterations must be >= {MIN_ITERATIONS}, got {iterations}")

    registry = WorkloadRegistry()
    for name, body, divisor in DEFAULT_WORKLOADS:
        count = iterations // divisor
        registry.register(
            name,
            partial(body, count),
            logical_op_count=count,
            description=body.__doc__ or "",
        )

    registry.register_async(
        ASYNC_LABEL,
        partial(gather_batch, range(async_count)),
        logical_op_count=async_count,
        description=f"Gather {async_count} coroutines resolving immediately",
    )
    return registry
