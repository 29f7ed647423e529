"""Pass 1: Group files by size."""

from typing import Iterable, Optional, Sized

from ..common.logging import get_logger
from .models import Candidate
from .progress import NullReporter, ProgressReporter

logger = get_logger(__name__)


class SizePass:
    """First pass: group files by size."""

    def __init__(self, reporter: Optional[ProgressReporter] = None) -> None:
        """Initialize size pass.

        Args:
            reporter: Receives one event per classified file
        """
        self.reporter = reporter or NullReporter()

    def find_candidates(self, entries: Iterable[Candidate]) -> dict[int, list[Candidate]]:
        """Find files with duplicate sizes.

        Args:
            entries: Scanned files, in traversal order

        Returns:
            Dictionary mapping size to the files of that size, only for
            sizes shared by at least two files
        """
        logger.info("Pass 1: Grouping files by size")
        self.reporter.phase_started(len(entries) if isinstance(entries, Sized) else None)

        by_size: dict[int, list[Candidate]] = {}
        total_files = 0
        for entry in entries:
            group = by_size.setdefault(entry.size, [])
            group.append(entry)
            total_files += 1
            self.reporter.item_processed(len(group) > 1)

        candidates = {size: group for size, group in by_size.items() if len(group) > 1}

        candidate_files = sum(len(group) for group in candidates.values())
        logger.info(
            f"Found {candidate_files} of {total_files} files in "
            f"{len(candidates)} size groups"
        )

        return candidates

    @staticmethod
    def flatten(size_groups: dict[int, list[Candidate]]) -> list[Candidate]:
        """Concatenate the members of every size group.

        Args:
            size_groups: Output of find_candidates

        Returns:
            All candidates, group by group, in insertion order
        """
        return [candidate for group in size_groups.values() for candidate in group]
