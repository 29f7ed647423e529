"""Data models for candidates and duplicate sets."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Candidate:
    """A regular file eligible for duplicate comparison."""

    path: str
    size: int
    digest: Optional[bytes] = None

    @property
    def is_hashed(self) -> bool:
        """Check whether the content digest has been computed."""
        return self.digest is not None


@dataclass(frozen=True)
class DuplicateSet:
    """Two or more files sharing size and content digest."""

    digest: bytes
    size: int
    paths: tuple[str, ...]

    @property
    def count(self) -> int:
        """Number of files in this set."""
        return len(self.paths)

    @property
    def wasted_size(self) -> int:
        """Space taken by every copy but one."""
        return self.size * (len(self.paths) - 1)

    @property
    def hexdigest(self) -> str:
        """Digest as a hex string."""
        return self.digest.hex()

    def shortest_path(self) -> str:
        """Get the shortest path, first occurrence on ties."""
        return min(self.paths, key=len)


@dataclass(frozen=True)
class ResolvedSet:
    """A duplicate set split into the kept original and its rejects."""

    original: str
    rejects: tuple[str, ...]
    digest: bytes
    size: int

    @property
    def wasted_size(self) -> int:
        """Space recovered by quarantining the rejects."""
        return self.size * len(self.rejects)


@dataclass(frozen=True)
class Relocation:
    """Where a reject goes, and whether it has been moved there."""

    source: str
    destination: str
    moved: bool = False


@dataclass
class SetReport:
    """Outcome of quarantining one resolved set."""

    original: str
    relocations: list[Relocation] = field(default_factory=list)
    size: int = 0
    digest: bytes = b""

    @property
    def moved_count(self) -> int:
        """Number of rejects actually moved."""
        return sum(1 for r in self.relocations if r.moved)
