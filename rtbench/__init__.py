"""rtbench - Micro-benchmarks for common Python runtime operations."""

from rtbench.version.rtbench_version import RTBENCH_VERSION, Version

__version__ = str(RTBENCH_VERSION)
__version_info__ = RTBENCH_VERSION

__all__ = [
    "RTBENCH_VERSION",
    "Version",
    "__version__",
    "__version_info__",
]
