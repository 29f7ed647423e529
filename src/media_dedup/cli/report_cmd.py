"""Report command for exporting duplicate data."""

from pathlib import Path

import typer
from humanize import naturalsize

from ..actions.quarantine import QuarantineMover
from ..common.exceptions import MediaDedupError
from ..config.settings import get_settings
from ..reporting.exporter import ReportExporter
from .formatters import print_error, print_info, print_success
from .scan_cmd import find_resolved_sets, print_traversal_errors


def report(
    path: Path = typer.Argument(..., help="Directory to scan"),
    format: str = typer.Option(
        "csv", "--format", "-f", help="Output format: csv or json"
    ),
    output: Path = typer.Option(
        ..., "--output", "-o", help="Output file path"
    ),
) -> None:
    """Export the planned quarantine moves to CSV or JSON (never moves files)."""
    if format.lower() not in ["csv", "json"]:
        print_error(f"Invalid format: {format}. Must be 'csv' or 'json'")
        raise typer.Exit(1)

    exit_code = 0
    try:
        settings = get_settings()
        scan_result, resolved_sets = find_resolved_sets(
            path,
            settings,
            workers=settings.hash_workers,
            tie_break=settings.tie_break,
            min_size=settings.min_file_size,
        )
        print_traversal_errors(scan_result)

        mover = QuarantineMover(settings.reject_folder)
        reports = [mover.relocate(r, dry_run=True) for r in resolved_sets]

        exporter = ReportExporter()
        if format.lower() == "csv":
            exporter.export_csv(reports, output)
        else:
            exporter.export_json(reports, output)

        total_rejects = sum(len(r.rejects) for r in resolved_sets)
        total_wasted = sum(r.wasted_size for r in resolved_sets)

        print_success(f"Exported report to: {output}")
        print_info(f"Duplicate sets: {len(resolved_sets)}")
        print_info(f"Duplicate files: {total_rejects}")
        print_info(f"Wasted space: {naturalsize(total_wasted)}")

    except MediaDedupError as e:
        print_error(f"Error: {e}")
        exit_code = 1
    except Exception as e:
        print_error(f"Report export failed: {e}")
        exit_code = 1

    if exit_code:
        raise typer.Exit(exit_code)
