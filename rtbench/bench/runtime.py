"""Runtime and host identification.

``detect_runtime()`` is called once at startup and its result handed to the
report writer; nothing else asks which interpreter is running.
"""

import platform
import sys

import psutil

from rtbench.models.bench_models import HostInfo, RuntimeInfo
from rtbench.models.constants import RuntimeKind

_IMPLEMENTATIONS: dict[str, RuntimeKind] = {
    "cpython": RuntimeKind.CPYTHON,
    "pypy": RuntimeKind.PYPY,
    "graalpy": RuntimeKind.GRAALPY,
    "graalvm": RuntimeKind.GRAALPY,
    "ironpython": RuntimeKind.IRONPYTHON,
    "jython": RuntimeKind.JYTHON,
}


def detect_runtime() -> RuntimeInfo:
    """Identify the Python implementation executing this process.

    PyPy reports its own release alongside the language level it implements,
    so its label reads e.g. ``PyPy 7.3.15 (Python 3.10.13)``.

    Returns:
        RuntimeInfo with the implementation kind and its version string.
    """
    name = sys.implementation.name.lower()
    kind = _IMPLEMENTATIONS.get(name, RuntimeKind.UNKNOWN)
    python_version = platform.python_version()

    if kind is RuntimeKind.PYPY:
        pypy = getattr(sys, "pypy_version_info", None)
        if pypy is not None:
            release = f"{pypy.major}.{pypy.minor}.{pypy.micro}"
            return RuntimeInfo(kind=kind, version=f"{release} (Python {python_version})")

    if kind is RuntimeKind.UNKNOWN:
        return RuntimeInfo(
            kind=kind, version=f"{sys.implementation.name} {python_version}"
        )

    return RuntimeInfo(kind=kind, version=python_version)


def collect_host_info() -> HostInfo:
    """Snapshot CPU and memory facts for exported results."""
    return HostInfo(
        platform=platform.platform(),
        machine=platform.machine(),
        physical_cores=psutil.cpu_count(logical=False),
        logical_cores=psutil.cpu_count(logical=True),
        total_memory_bytes=psutil.virtual_memory().total,
    )
