"""Ordered registry of benchmark workloads.

Usage:
    from rtbench.bench.registry import WorkloadRegistry

    registry = WorkloadRegistry()

    @registry.workload("Function Calls", logical_op_count=1_000_000)
    def function_calls():
        ...

    registry.register("Noop", lambda: None, logical_op_count=1000)
    registry.register_async("Async/Gather", gather_batch, logical_op_count=10_000)

    for workload in registry:
        ...
"""

import inspect
import math
from collections.abc import Awaitable, Callable, Iterable, Iterator
from numbers import Real

from rtbench.bench.base import AsyncWorkload, Workload


class WorkloadRegistryError(Exception):
    """Base exception for registry errors."""

    pass


class InvalidWorkloadError(WorkloadRegistryError):
    """Raised when a workload is rejected at registration time."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid workload '{name}': {reason}")


class WorkloadNameCollisionError(WorkloadRegistryError):
    """Raised when two workloads share a name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Workload name collision: '{name}' is already registered")


class WorkloadNotFoundError(WorkloadRegistryError):
    """Raised when a requested workload is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Workload not found: '{name}'")


def _validate(name: str, operation: Callable, logical_op_count: object) -> None:
    """Reject descriptors that could not produce a finite rate."""
    if not isinstance(name, str) or not name.strip():
        raise InvalidWorkloadError(str(name), "name must be a non-empty string")
    if not callable(operation):
        raise InvalidWorkloadError(name, "operation must be callable")
    # bool is an int subclass, but True is not an operation count
    if isinstance(logical_op_count, bool) or not isinstance(logical_op_count, Real):
        raise InvalidWorkloadError(
            name, f"logical_op_count must be a number, got {logical_op_count!r}"
        )
    if not math.isfinite(logical_op_count) or logical_op_count <= 0:
        raise InvalidWorkloadError(
            name, f"logical_op_count must be > 0, got {logical_op_count!r}"
        )


class WorkloadRegistry:
    """Insertion-ordered collection of workloads plus one optional async workload.

    Registration order is execution order and report order. Names are unique
    across synchronous and async workloads.

    Example:
        >>> registry = WorkloadRegistry()
        >>> registry.register("noop", lambda: None, logical_op_count=1000)
        >>> [w.name for w in registry]
        ['noop']
    """

    def __init__(self) -> None:
        self._workloads: dict[str, Workload] = {}
        self._async: AsyncWorkload | None = None

    def register(
        self,
        name: str,
        operation: Callable[[], object],
        logical_op_count: int | float,
        description: str = "",
    ) -> Workload:
        """Append a synchronous workload.

        Args:
            name: Display name, unique within the registry.
            operation: Zero-argument callable; its return value is discarded.
            logical_op_count: Declared unit count used to derive ops/sec.
            description: Optional one-line description for ``--list``.

        Returns:
            The registered Workload.

        Raises:
            InvalidWorkloadError: If the descriptor is malformed.
            WorkloadNameCollisionError: If the name is taken.
        """
        _validate(name, operation, logical_op_count)
        if inspect.iscoroutinefunction(operation):
            raise InvalidWorkloadError(
                name, "coroutine functions must be registered with register_async()"
            )
        self._check_collision(name)

        workload = Workload(
            name=name,
            operation=operation,
            logical_op_count=logical_op_count,
            description=description,
        )
        self._workloads[name] = workload
        return workload

    def workload(
        self,
        name: str,
        logical_op_count: int | float,
        description: str = "",
    ) -> Callable[[Callable[[], object]], Callable[[], object]]:
        """Decorator form of register(); returns the function unchanged."""

        def decorator(func: Callable[[], object]) -> Callable[[], object]:
            self.register(name, func, logical_op_count, description or _first_line(func))
            return func

        return decorator

    def register_async(
        self,
        name: str,
        operation: Callable[[], Awaitable[object]],
        logical_op_count: int | float,
        description: str = "",
    ) -> AsyncWorkload:
        """Set the single async workload run after the synchronous ones.

        Raises:
            InvalidWorkloadError: If the descriptor is malformed.
            WorkloadNameCollisionError: If the name is taken or an async
                workload is already registered.
        """
        _validate(name, operation, logical_op_count)
        if not inspect.iscoroutinefunction(operation):
            raise InvalidWorkloadError(
                name, "async workloads must be coroutine functions; use register()"
            )
        if self._async is not None:
            raise WorkloadNameCollisionError(name)
        self._check_collision(name)

        self._async = AsyncWorkload(
            name=name,
            operation=operation,
            logical_op_count=logical_op_count,
            description=description,
        )
        return self._async

    def _check_collision(self, name: str) -> None:
        if name in self._workloads or (
            self._async is not None and self._async.name == name
        ):
            raise WorkloadNameCollisionError(name)

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    @property
    def async_workload(self) -> AsyncWorkload | None:
        """The async workload, or None if none was registered."""
        return self._async

    def get(self, name: str) -> Workload:
        """Get a synchronous workload by name.

        Raises:
            WorkloadNotFoundError: If no such workload is registered.
        """
        if name not in self._workloads:
            raise WorkloadNotFoundError(name)
        return self._workloads[name]

    def names(self) -> list[str]:
        """Return synchronous workload names in registration order."""
        return list(self._workloads)

    def select(
        self, names: Iterable[str], include_async: bool = True
    ) -> "WorkloadRegistry":
        """Build a new registry holding only the named workloads.

        Registration order is kept regardless of the order of ``names``.

        Raises:
            WorkloadNotFoundError: If any name is unknown.
        """
        wanted = set(names)
        for name in wanted:
            if name not in self._workloads:
                raise WorkloadNotFoundError(name)

        subset = WorkloadRegistry()
        for workload in self._workloads.values():
            if workload.name in wanted:
                subset._workloads[workload.name] = workload
        if include_async:
            subset._async = self._async
        return subset

    def without_async(self) -> "WorkloadRegistry":
        """Return a copy of this registry with the async workload dropped."""
        return self.select(self._workloads, include_async=False)

    def __iter__(self) -> Iterator[Workload]:
        return iter(list(self._workloads.values()))

    def __len__(self) -> int:
        """Return number of synchronous workloads."""
        return len(self._workloads)

    def __contains__(self, name: object) -> bool:
        return name in self._workloads or (
            self._async is not None and self._async.name == name
        )


def _first_line(func: Callable) -> str:
    doc = inspect.getdoc(func) or ""
    return doc.splitlines()[0] if doc else ""
