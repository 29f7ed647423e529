"""Pass 2: Group files by SHA-1 checksum."""

import hashlib
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, Optional

from ..common.constants import CHUNK_SIZE
from ..common.exceptions import HashError
from ..common.logging import get_logger
from .models import Candidate, DuplicateSet
from .progress import NullReporter, ProgressReporter
from .size_pass import SizePass

logger = get_logger(__name__)


def file_digest(
    path: str,
    chunk_size: int = CHUNK_SIZE,
    expected_size: Optional[int] = None,
) -> bytes:
    """Compute the SHA-1 digest of a whole file.

    Args:
        path: File to read
        chunk_size: Number of bytes read at a time
        expected_size: Size recorded at scan time, checked against the bytes read

    Returns:
        20-byte digest

    Raises:
        HashError: If the file cannot be opened or read, or its size changed
    """
    hasher = hashlib.sha1()
    read = 0

    try:
        with open(path, "rb") as f:
            for chunk in iter(lambda: f.read(chunk_size), b""):
                hasher.update(chunk)
                read += len(chunk)
    except OSError as e:
        raise HashError(f"Failed to read {path}: {e}", path=path) from e

    if expected_size is not None and read != expected_size:
        raise HashError(
            f"Size of {path} changed during the run "
            f"(scanned {expected_size} bytes, read {read})",
            path=path,
        )

    return hasher.digest()


class ChecksumPass:
    """Second pass: group same-size files by content digest."""

    def __init__(
        self,
        reporter: Optional[ProgressReporter] = None,
        workers: int = 1,
        chunk_size: int = CHUNK_SIZE,
    ) -> None:
        """Initialize checksum pass.

        Args:
            reporter: Receives one event per hashed file
            workers: Hashing threads; 1 hashes sequentially
            chunk_size: Number of bytes read at a time
        """
        self.reporter = reporter or NullReporter()
        self.workers = max(1, workers)
        self.chunk_size = chunk_size

    def find_duplicates(
        self, size_groups: dict[int, list[Candidate]]
    ) -> list[DuplicateSet]:
        """Find true duplicates by SHA-1 checksum.

        Args:
            size_groups: Groups of files with same size

        Returns:
            Duplicate sets with at least two members each

        Raises:
            HashError: If any candidate cannot be read
        """
        logger.info("Pass 2: Grouping by SHA-1 checksum")

        candidates = SizePass.flatten(size_groups)
        if not candidates:
            logger.info("No candidates to check")
            return []

        logger.info(f"Comparing {len(candidates)} files in detail")
        self.reporter.phase_started(len(candidates))

        # Keyed by size as well, so only files of one size group can meet
        by_digest: dict[tuple[int, bytes], list[str]] = {}
        for candidate, digest in self._digests(candidates):
            candidate.digest = digest
            members = by_digest.setdefault((candidate.size, digest), [])
            members.append(candidate.path)
            self.reporter.item_processed(len(members) > 1)

        duplicate_sets = [
            DuplicateSet(digest=digest, size=size, paths=tuple(paths))
            for (size, digest), paths in by_digest.items()
            if len(paths) > 1
        ]

        total_files = sum(s.count for s in duplicate_sets)
        logger.info(f"Found {total_files} duplicate files in {len(duplicate_sets)} sets")

        return duplicate_sets

    def _digests(self, candidates: list[Candidate]) -> Iterator[tuple[Candidate, bytes]]:
        """Yield each candidate with its digest, in input order."""
        if self.workers == 1:
            for candidate in candidates:
                yield candidate, self._hash(candidate)
            return

        failures: list[tuple[str, Exception]] = []
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            futures = [
                (c, executor.submit(file_digest, c.path, self.chunk_size, c.size))
                for c in candidates
            ]
            for candidate, future in futures:
                try:
                    digest = future.result()
                except HashError as e:
                    logger.error(str(e))
                    failures.append((candidate.path, e))
                    self.reporter.error_occurred()
                    continue
                yield candidate, digest

        if failures:
            first_path = failures[0][0]
            raise HashError(
                f"Failed to read {len(failures)} file(s), first: {first_path}",
                path=first_path,
                failures=failures,
            )

    def _hash(self, candidate: Candidate) -> bytes:
        try:
            digest = file_digest(candidate.path, self.chunk_size, candidate.size)
        except HashError:
            self.reporter.error_occurred()
            raise
        logger.debug(f"{digest.hex()} {candidate.path}")
        return digest
