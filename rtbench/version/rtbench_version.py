"""Release identity for rtbench: version number, source digest, release date.

Workload bodies live inside the package, so the digest changes whenever a
workload is edited and two sets of numbers can be told apart by it.
"""

import hashlib
from dataclasses import dataclass
from datetime import date
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent.parent


@dataclass(frozen=True)
class Version:
    """Version number plus the digest of the sources that produced a run."""

    major: int
    minor: int
    patch: int
    hash: str
    date: date

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def full_version(self) -> str:
        """Return e.g. '0.1.0 (hash: 1a2b3c4d, date: 2026-10-18)'."""
        return f"{self} (hash: {self.hash[:8]}, date: {self.date.isoformat()})"


def source_digest(root: Path = PACKAGE_DIR) -> str:
    """SHA-256 over every module under ``root``, path and contents."""
    hasher = hashlib.sha256()
    for path in sorted(root.rglob("*.py")):
        if "__pycache__" in path.parts:
            continue
        hasher.update(path.relative_to(root).as_posix().encode())
        hasher.update(path.read_bytes())
    return hasher.hexdigest()


RTBENCH_VERSION = Version(
    major=0,
    minor=1,
    patch=0,
    hash=source_digest(),
    date=date(2026, 10, 18),
)
