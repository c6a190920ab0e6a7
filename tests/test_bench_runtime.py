"""Tests for runtime and host detection."""

import sys
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from rtbench.bench.runtime import collect_host_info, detect_runtime
from rtbench.models.bench_models import HostInfo
from rtbench.models.constants import RuntimeKind


@pytest.mark.skipif(sys.implementation.name != "cpython", reason="CPython only")
def test_detect_cpython():
    """Test detection on the interpreter running the tests."""
    import platform

    runtime = detect_runtime()
    assert runtime.kind is RuntimeKind.CPYTHON
    assert runtime.version == platform.python_version()
    assert runtime.label() == f"CPython {platform.python_version()}"


def test_detect_pypy():
    """Test that PyPy reports its own release and language level."""
    fake_sys = SimpleNamespace(
        implementation=SimpleNamespace(name="pypy"),
        pypy_version_info=SimpleNamespace(major=7, minor=3, micro=15),
    )
    with patch("rtbench.bench.runtime.sys", fake_sys), patch(
        "rtbench.bench.runtime.platform.python_version", return_value="3.10.13"
    ):
        runtime = detect_runtime()

    assert runtime.kind is RuntimeKind.PYPY
    assert runtime.label() == "PyPy 7.3.15 (Python 3.10.13)"


def test_detect_graalpy():
    """Test GraalPy maps to its own kind."""
    fake_sys = SimpleNamespace(implementation=SimpleNamespace(name="graalpy"))
    with patch("rtbench.bench.runtime.sys", fake_sys), patch(
        "rtbench.bench.runtime.platform.python_version", return_value="3.11.7"
    ):
        runtime = detect_runtime()

    assert runtime.kind is RuntimeKind.GRAALPY
    assert runtime.version == "3.11.7"


def test_detect_unknown_implementation():
    """Test an unrecognized implementation keeps its own name in the label."""
    fake_sys = SimpleNamespace(implementation=SimpleNamespace(name="mystery"))
    with patch("rtbench.bench.runtime.sys", fake_sys), patch(
        "rtbench.bench.runtime.platform.python_version", return_value="3.13.0"
    ):
        runtime = detect_runtime()

    assert runtime.kind is RuntimeKind.UNKNOWN
    assert runtime.version == "mystery 3.13.0"


def test_collect_host_info():
    """Test host snapshot fields."""
    host = collect_host_info()

    assert isinstance(host, HostInfo)
    assert host.machine
    assert host.logical_cores is None or host.logical_cores >= 1
    assert host.total_memory_bytes > 0
