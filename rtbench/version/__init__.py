"""Version information for rtbench."""

from rtbench.version.rtbench_version import RTBENCH_VERSION, Version

__all__ = ["RTBENCH_VERSION", "Version"]
