"""Tests for the workload registry."""

import math

import pytest

from rtbench.bench.registry import (
    InvalidWorkloadError,
    WorkloadNameCollisionError,
    WorkloadNotFoundError,
    WorkloadRegistry,
    WorkloadRegistryError,
)


async def _async_noop():
    return None


def test_register_preserves_order():
    """Test that iteration follows registration order."""
    registry = WorkloadRegistry()
    for name in ("zeta", "alpha", "mid"):
        registry.register(name, lambda: None, logical_op_count=10)

    assert [w.name for w in registry] == ["zeta", "alpha", "mid"]
    assert registry.names() == ["zeta", "alpha", "mid"]
    assert len(registry) == 3


@pytest.mark.parametrize("count", [0, -1, -0.5, math.nan, math.inf, True, "100", None])
def test_register_rejects_invalid_op_count(count):
    """Test that non-positive or non-numeric counts fail at registration."""
    registry = WorkloadRegistry()

    with pytest.raises(InvalidWorkloadError):
        registry.register("bad", lambda: None, logical_op_count=count)

    assert "bad" not in registry
    assert len(registry) == 0


def test_register_rejects_bad_name_and_operation():
    """Test name and callable validation."""
    registry = WorkloadRegistry()

    with pytest.raises(InvalidWorkloadError):
        registry.register("", lambda: None, logical_op_count=1)
    with pytest.raises(InvalidWorkloadError):
        registry.register("not callable", 42, logical_op_count=1)
    with pytest.raises(InvalidWorkloadError):
        registry.register("coroutine", _async_noop, logical_op_count=1)


def test_invalid_workload_is_registry_error():
    """Test that registration errors are distinct from runtime failures."""
    assert issubclass(InvalidWorkloadError, WorkloadRegistryError)
    assert not issubclass(InvalidWorkloadError, RuntimeError)


def test_register_accepts_fractional_count():
    """Test that positive float counts are allowed."""
    registry = WorkloadRegistry()
    workload = registry.register("half", lambda: None, logical_op_count=0.5)
    assert workload.logical_op_count == 0.5


def test_name_collision():
    """Test duplicate names are rejected, including against the async workload."""
    registry = WorkloadRegistry()
    registry.register("dup", lambda: None, logical_op_count=1)

    with pytest.raises(WorkloadNameCollisionError):
        registry.register("dup", lambda: None, logical_op_count=1)

    registry.register_async("async", _async_noop, logical_op_count=1)
    with pytest.raises(WorkloadNameCollisionError):
        registry.register("async", lambda: None, logical_op_count=1)


def test_single_async_workload():
    """Test that only one async workload may be registered."""
    registry = WorkloadRegistry()
    registry.register_async("first", _async_noop, logical_op_count=3)

    with pytest.raises(WorkloadNameCollisionError):
        registry.register_async("second", _async_noop, logical_op_count=3)

    assert registry.async_workload.name == "first"
    assert "first" in registry
    assert len(registry) == 0


def test_register_async_validates_count():
    """Test async registration applies the same count rules."""
    registry = WorkloadRegistry()
    with pytest.raises(InvalidWorkloadError):
        registry.register_async("async", _async_noop, logical_op_count=0)
    assert registry.async_workload is None


def test_workload_decorator():
    """Test decorator registration returns the function unchanged."""
    registry = WorkloadRegistry()

    @registry.workload("decorated", logical_op_count=5)
    def body():
        """Do nothing, quickly."""
        return "ran"

    assert body() == "ran"
    workload = registry.get("decorated")
    assert workload.logical_op_count == 5
    assert workload.description == "Do nothing, quickly."
    assert workload() == "ran"


def test_get_missing():
    """Test lookup of an unknown workload."""
    registry = WorkloadRegistry()
    with pytest.raises(WorkloadNotFoundError):
        registry.get("missing")


def test_select_keeps_registration_order():
    """Test that selection keeps registry order and the async workload."""
    registry = WorkloadRegistry()
    for name in ("a", "b", "c"):
        registry.register(name, lambda: None, logical_op_count=1)
    registry.register_async("async", _async_noop, logical_op_count=1)

    subset = registry.select(["c", "a"])
    assert subset.names() == ["a", "c"]
    assert subset.async_workload is registry.async_workload

    sync_only = registry.without_async()
    assert sync_only.names() == ["a", "b", "c"]
    assert sync_only.async_workload is None

    with pytest.raises(WorkloadNotFoundError):
        registry.select(["a", "nope"])


def test_register_async_rejects_plain_callable():
    """Test a sync callable cannot be registered as the async workload."""
    registry = WorkloadRegistry()
    with pytest.raises(InvalidWorkloadError, match="coroutine functions"):
        registry.register_async("async", lambda: 42, logical_op_count=1)
    assert registry.async_workload is None
    assert "async" not in registry
