"""Workload descriptors."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class Workload:
    """A named, zero-argument operation whose run time is measured.

    ``logical_op_count`` is the number of units the operation claims to
    perform. It is only used to turn elapsed time into a rate and is never
    checked against what the operation really does.

    Instances are built by ``WorkloadRegistry.register``, which validates
    them; the runner trusts what it gets from a registry.
    """

    name: str
    operation: Callable[[], object]
    logical_op_count: int | float
    description: str = ""

    def __call__(self) -> object:
        return self.operation()


@dataclass(frozen=True)
class AsyncWorkload:
    """A named coroutine function measured once, outside the warm-up protocol."""

    name: str
    operation: Callable[[], Awaitable[object]]
    logical_op_count: int | float
    description: str = ""

    async def __call__(self) -> object:
        return await self.operation()
