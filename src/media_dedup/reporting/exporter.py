"""CSV and JSON export functionality."""

import csv
import json
from pathlib import Path

from ..common.logging import get_logger
from ..detector.models import SetReport

logger = get_logger(__name__)

CSV_HEADER = ["set_id", "role", "path", "destination", "moved", "size", "sha1"]


class ReportExporter:
    """Exports quarantine reports to CSV or JSON."""

    def export_csv(self, reports: list[SetReport], output_path: Path) -> None:
        """Export set reports to CSV, one row per file.

        Args:
            reports: Reports in presentation order
            output_path: Output file path
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(CSV_HEADER)

            for set_id, report in enumerate(reports, start=1):
                digest = report.digest.hex()
                writer.writerow(
                    [set_id, "original", report.original, "", False, report.size, digest]
                )
                for relocation in report.relocations:
                    writer.writerow([
                        set_id,
                        "reject",
                        relocation.source,
                        relocation.destination,
                        relocation.moved,
                        report.size,
                        digest,
                    ])

        logger.info(f"Exported {len(reports)} sets to CSV: {output_path}")

    def export_json(self, reports: list[SetReport], output_path: Path) -> None:
        """Export set reports to JSON.

        Args:
            reports: Reports in presentation order
            output_path: Output file path
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "total_sets": len(reports),
            "total_rejects": sum(len(r.relocations) for r in reports),
            "total_wasted_space": sum(r.size * len(r.relocations) for r in reports),
            "sets": [
                {
                    "set_id": set_id,
                    "sha1": report.digest.hex(),
                    "size": report.size,
                    "original": report.original,
                    "rejects": [
                        {
                            "path": r.source,
                            "destination": r.destination,
                            "moved": r.moved,
                        }
                        for r in report.relocations
                    ],
                }
                for set_id, report in enumerate(reports, start=1)
            ],
        }

        with open(output_path, "w") as f:
            json.dump(data, f, indent=2)

        logger.info(f"Exported {len(reports)} sets to JSON: {output_path}")
