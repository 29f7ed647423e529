"""Quarantine operations: move rejects next to their original."""

import os
from pathlib import Path

from ..common.constants import REJECT_FOLDER
from ..common.exceptions import QuarantineError
from ..common.logging import get_logger
from ..detector.models import Relocation, ResolvedSet, SetReport

logger = get_logger(__name__)


class QuarantineMover:
    """Moves rejected copies into a quarantine folder (never deletes)."""

    def __init__(self, reject_folder: str = REJECT_FOLDER) -> None:
        """Initialize quarantine mover.

        Args:
            reject_folder: Name of the quarantine folder
        """
        self.reject_folder = reject_folder
        # Destinations handed out during this run, including simulated ones
        self._claimed: set[str] = set()

    def quarantine_dir(self, original: str) -> Path:
        """Quarantine folder for the directory holding ``original``."""
        return Path(original).parent / self.reject_folder

    @staticmethod
    def destination_for(reject: str, quarantine_dir: Path, number: int) -> Path:
        """Build ``<stem>_<number><suffix>`` inside the quarantine folder.

        Args:
            reject: Path of the rejected copy
            quarantine_dir: Folder receiving the copy
            number: 1-based sequence number

        Returns:
            Destination path
        """
        name = Path(reject)
        return quarantine_dir / f"{name.stem}_{number}{name.suffix}"

    def relocate(self, resolved: ResolvedSet, dry_run: bool = True) -> SetReport:
        """Quarantine the rejects of one resolved set.

        Args:
            resolved: Original and rejects
            dry_run: If True, only compute destinations

        Returns:
            Report with one relocation per reject

        Raises:
            QuarantineError: If the folder cannot be created or a move fails;
                its ``report`` lists the moves already done for this set
        """
        report = SetReport(
            original=resolved.original,
            size=resolved.size,
            digest=resolved.digest,
        )
        if not resolved.rejects:
            return report

        quarantine_dir = self.quarantine_dir(resolved.original)
        number = 0

        for position, reject in enumerate(resolved.rejects, start=1):
            number = max(number + 1, position)
            destination = self.destination_for(reject, quarantine_dir, number)
            while self._is_taken(destination):
                number += 1
                destination = self.destination_for(reject, quarantine_dir, number)
            self._claimed.add(self._claim_key(destination))

            if dry_run:
                logger.info(f"[DRY RUN] Would move {reject} -> {destination}")
                report.relocations.append(Relocation(reject, str(destination)))
                continue

            try:
                if position == 1:
                    self._ensure_dir(quarantine_dir)
                self._move(reject, destination)
            except QuarantineError as e:
                e.report = report
                raise
            report.relocations.append(Relocation(reject, str(destination), moved=True))

        return report

    @staticmethod
    def _claim_key(destination: Path) -> str:
        # Case-insensitive file systems treat IMG_1.jpg and img_1.jpg as one name
        return os.path.normcase(str(destination))

    def _is_taken(self, destination: Path) -> bool:
        return self._claim_key(destination) in self._claimed or os.path.lexists(destination)

    def _ensure_dir(self, quarantine_dir: Path) -> None:
        try:
            quarantine_dir.mkdir(mode=0o755, exist_ok=True)
        except OSError as e:
            raise QuarantineError(
                f"Failed to create quarantine folder {quarantine_dir}: {e}",
                path=str(quarantine_dir),
            ) from e

    def _move(self, reject: str, destination: Path) -> None:
        try:
            os.rename(reject, destination)
        except OSError as e:
            raise QuarantineError(
                f"Failed to move {reject} to {destination}: {e}",
                path=reject,
            ) from e
        logger.info(f"Moved {reject} -> {destination}")
