"""Local directory tree scanner."""

import os
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..common.constants import REJECT_FOLDER
from ..common.exceptions import ScanError
from ..common.logging import get_logger
from ..detector.models import Candidate
from ..detector.progress import NullReporter, ProgressReporter
from .filters import ExtensionFilter

logger = get_logger(__name__)


@dataclass(frozen=True)
class TraversalError:
    """An entry that could not be read while walking the tree."""

    path: str
    message: str


@dataclass
class ScanResult:
    """Files found under a root, plus the non-fatal errors met on the way."""

    entries: list[Candidate] = field(default_factory=list)
    errors: list[TraversalError] = field(default_factory=list)
    skipped_quarantines: int = 0

    @property
    def total_size(self) -> int:
        """Combined size of all entries."""
        return sum(e.size for e in self.entries)


class DirectoryWalker:
    """Walks a directory tree and collects candidate files."""

    def __init__(
        self,
        extension_filter: Optional[ExtensionFilter] = None,
        reject_folder: str = REJECT_FOLDER,
        min_size: int = 0,
        reporter: Optional[ProgressReporter] = None,
    ) -> None:
        """Initialize walker.

        Args:
            extension_filter: Allow-list of file suffixes
            reject_folder: Quarantine folder name; such folders are never entered
            min_size: Minimum file size in bytes
            reporter: Receives one event per traversal error
        """
        self.extension_filter = extension_filter or ExtensionFilter()
        self.reject_folder = reject_folder
        self.min_size = min_size
        self.reporter = reporter or NullReporter()

    def scan(self, root: str) -> ScanResult:
        """Scan a directory tree.

        Directories and files are visited in name order so that repeated runs
        see the same sequence.

        Args:
            root: Directory to scan

        Returns:
            ScanResult with candidates in traversal order

        Raises:
            ScanError: If root does not exist or is not a directory
        """
        if not os.path.exists(root):
            raise ScanError(f"Directory does not exist: {root}")
        if not os.path.isdir(root):
            raise ScanError(f"Not a directory: {root}")

        result = ScanResult()

        if self.reject_folder in Path(root).resolve().parts:
            logger.warning(f"{root} is inside a quarantine folder, nothing to scan")
            result.skipped_quarantines += 1
            return result

        logger.info(f"Scanning {root}")

        def on_error(error: OSError) -> None:
            self._record_error(result, error.filename or root, error)

        for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
            kept = []
            for name in sorted(dirnames):
                if name == self.reject_folder:
                    logger.debug(f"Skipping quarantine folder {os.path.join(dirpath, name)}")
                    result.skipped_quarantines += 1
                    continue
                kept.append(name)
            dirnames[:] = kept

            for name in sorted(filenames):
                path = os.path.join(dirpath, name)
                if not self.extension_filter.accepts(path):
                    continue

                try:
                    info = os.lstat(path)
                except OSError as e:
                    self._record_error(result, path, e)
                    continue

                if not stat.S_ISREG(info.st_mode):
                    continue
                if info.st_size < self.min_size:
                    continue

                result.entries.append(Candidate(path=path, size=info.st_size))

        logger.info(
            f"Found {len(result.entries)} files, "
            f"{len(result.errors)} errors, "
            f"skipped {result.skipped_quarantines} quarantine folders"
        )
        return result

    def _record_error(self, result: ScanResult, path: str, error: OSError) -> None:
        logger.warning(f"Cannot read {path}: {error}")
        result.errors.append(TraversalError(path=str(path), message=str(error)))
        self.reporter.error_occurred()
