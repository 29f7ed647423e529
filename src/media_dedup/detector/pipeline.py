"""Two-pass duplicate detection pipeline."""

from typing import Iterable, Optional

from ..common.constants import CHUNK_SIZE
from ..common.logging import get_logger
from .checksum_pass import ChecksumPass
from .models import Candidate, DuplicateSet
from .progress import ProgressReporter
from .size_pass import SizePass

logger = get_logger(__name__)


class DetectionPipeline:
    """Orchestrates size bucketing followed by content hashing."""

    def __init__(
        self,
        size_reporter: Optional[ProgressReporter] = None,
        hash_reporter: Optional[ProgressReporter] = None,
        workers: int = 1,
        chunk_size: int = CHUNK_SIZE,
    ) -> None:
        """Initialize detection pipeline.

        Args:
            size_reporter: Receives size pass events
            hash_reporter: Receives checksum pass events
            workers: Hashing threads
            chunk_size: Read size when hashing
        """
        self.size_pass = SizePass(size_reporter)
        self.checksum_pass = ChecksumPass(hash_reporter, workers=workers, chunk_size=chunk_size)

    def detect_duplicates(self, entries: Iterable[Candidate]) -> list[DuplicateSet]:
        """Run duplicate detection pipeline.

        Args:
            entries: Scanned files, in traversal order

        Returns:
            List of duplicate sets, in no particular order

        Raises:
            HashError: If a candidate cannot be read
        """
        logger.info("Starting duplicate detection pipeline")

        # Pass 1: Group by size
        size_groups = self.size_pass.find_candidates(entries)

        if not size_groups:
            logger.info("No duplicate candidates found")
            return []

        # Pass 2: Group by SHA-1
        duplicate_sets = self.checksum_pass.find_duplicates(size_groups)

        if not duplicate_sets:
            logger.info("No true duplicates found")
            return []

        logger.info(f"Detection complete: {len(duplicate_sets)} duplicate sets found")
        return duplicate_sets
