"""Keep strategies for choosing which copy of a duplicate set survives."""

from typing import Iterable

from ..common.constants import TIE_BREAKS
from ..common.exceptions import ConfigError
from ..common.logging import get_logger
from ..detector.models import DuplicateSet, ResolvedSet

logger = get_logger(__name__)


class KeepStrategy:
    """Base class for keep strategies."""

    def select_original(self, dup_set: DuplicateSet) -> int:
        """Select the index of the file to keep.

        Args:
            dup_set: Duplicate set

        Returns:
            Index into ``dup_set.paths``
        """
        raise NotImplementedError

    def resolve(self, dup_set: DuplicateSet) -> ResolvedSet:
        """Split a duplicate set into its original and rejects.

        The rejects keep their relative order; the set itself is left as is.
        """
        keep = self.select_original(dup_set)
        rejects = tuple(p for i, p in enumerate(dup_set.paths) if i != keep)
        return ResolvedSet(
            original=dup_set.paths[keep],
            rejects=rejects,
            digest=dup_set.digest,
            size=dup_set.size,
        )


class KeepShortestPathStrategy(KeepStrategy):
    """Keep the file with the shortest path."""

    def __init__(self, tie_break: str = "first-seen") -> None:
        """Initialize strategy.

        Args:
            tie_break: ``first-seen`` keeps the earliest of equally short
                paths, ``path`` keeps the lexicographically smallest one
        """
        if tie_break not in TIE_BREAKS:
            raise ConfigError(
                f"Invalid tie-break '{tie_break}'. Valid options: {', '.join(TIE_BREAKS)}"
            )
        self.tie_break = tie_break

    def select_original(self, dup_set: DuplicateSet) -> int:
        """Keep shortest path."""
        paths = dup_set.paths
        if self.tie_break == "path":
            return min(range(len(paths)), key=lambda i: (len(paths[i]), paths[i]))

        # Strict comparison keeps the first occurrence on ties
        keep = 0
        for i, path in enumerate(paths):
            if len(path) < len(paths[keep]):
                keep = i
        return keep


def resolve_sets(
    duplicate_sets: Iterable[DuplicateSet], strategy: KeepStrategy
) -> list[ResolvedSet]:
    """Resolve every set and order them by original path, ignoring case.

    Args:
        duplicate_sets: Sets from the detection pipeline
        strategy: Strategy picking the original

    Returns:
        Resolved sets in presentation order
    """
    resolved = [strategy.resolve(s) for s in duplicate_sets]
    resolved.sort(key=lambda r: r.original.lower())
    logger.debug(f"Resolved {len(resolved)} duplicate sets")
    return resolved


def get_strategy(strategy_name: str = "shortest", tie_break: str = "first-seen") -> KeepStrategy:
    """Get keep strategy by name.

    Args:
        strategy_name: Strategy name (shortest)
        tie_break: Tie-break among equally ranked files

    Returns:
        KeepStrategy instance

    Raises:
        ConfigError: If strategy name or tie-break is invalid
    """
    strategies = {
        "shortest": KeepShortestPathStrategy,
    }

    strategy_class = strategies.get(strategy_name.lower())
    if not strategy_class:
        raise ConfigError(
            f"Invalid strategy '{strategy_name}'. "
            f"Valid options: {', '.join(strategies.keys())}"
        )

    return strategy_class(tie_break)
