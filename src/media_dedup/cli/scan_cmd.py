"""Scan command: find duplicates and quarantine the rejects."""

from pathlib import Path
from typing import Optional

import typer
from humanize import naturalsize

from ..actions.quarantine import QuarantineMover
from ..actions.strategies import get_strategy, resolve_sets
from ..common.exceptions import MediaDedupError, QuarantineError
from ..config.settings import Settings, get_settings
from ..detector.models import ResolvedSet, SetReport
from ..detector.pipeline import DetectionPipeline
from ..scanner.filters import ExtensionFilter
from ..scanner.walker import DirectoryWalker, ScanResult
from .formatters import (
    RichProgressReporter,
    create_progress,
    print_error,
    print_info,
    print_panel,
    print_path,
    print_success,
    print_warning,
)


def find_resolved_sets(
    root: Path,
    settings: Settings,
    workers: int,
    tie_break: str,
    min_size: int,
) -> tuple[ScanResult, list[ResolvedSet]]:
    """Walk ``root``, detect duplicates and pick the original of each set.

    Args:
        root: Directory to scan
        settings: Effective settings
        workers: Hashing threads
        tie_break: Tie-break among equally short paths
        min_size: Minimum file size in bytes

    Returns:
        The scan result and the resolved sets in presentation order

    Raises:
        MediaDedupError: On any fatal condition
    """
    strategy = get_strategy("shortest", tie_break)

    progress = create_progress()
    with progress:
        walker = DirectoryWalker(
            extension_filter=ExtensionFilter(settings.extensions),
            reject_folder=settings.reject_folder,
            min_size=min_size,
            reporter=RichProgressReporter(progress, "[cyan]Scanning..."),
        )
        scan_result = walker.scan(str(root))

        pipeline = DetectionPipeline(
            size_reporter=RichProgressReporter(progress, "[cyan]Comparing sizes..."),
            hash_reporter=RichProgressReporter(progress, "[cyan]Hashing..."),
            workers=workers,
            chunk_size=settings.chunk_size,
        )
        duplicate_sets = pipeline.detect_duplicates(scan_result.entries)

    return scan_result, resolve_sets(duplicate_sets, strategy)


def print_traversal_errors(scan_result: ScanResult) -> None:
    """Print the batched traversal error report."""
    if not scan_result.errors:
        return

    print_warning("The following errors were encountered during the scan:")
    for error in scan_result.errors:
        print_path(f"- '{error.path}': {error.message}", indent=1)


def print_set_report(report: SetReport) -> None:
    """Print one original followed by where its rejects go."""
    print_info("")
    print_path(report.original, style="bold green")
    for relocation in report.relocations:
        print_path(f"{relocation.source} → {relocation.destination}", indent=2)


def scan(
    path: Path = typer.Argument(..., help="Directory to scan"),
    dry_run: bool = typer.Option(
        True, "--dry-run/--no-dry-run", help="Preview moves without executing (default: dry-run)"
    ),
    execute: bool = typer.Option(
        False, "--execute", help="Move the duplicates (overrides dry-run)"
    ),
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Skip confirmation prompt (only with --execute)"
    ),
    workers: Optional[int] = typer.Option(
        None, "--workers", "-w", min=1, help="Hashing threads [default: from settings]"
    ),
    tie_break: Optional[str] = typer.Option(
        None, "--tie-break", help="Among equally short paths keep: first-seen, path"
    ),
    min_size: Optional[int] = typer.Option(
        None, "--min-size", min=0, help="Minimum file size in bytes"
    ),
) -> None:
    """Scan a directory tree and quarantine duplicate files."""
    # If --execute is specified, it overrides dry-run
    if execute:
        dry_run = False

    exit_code = 0
    try:
        settings = get_settings()
        print_info("Scanning directory and comparing files...")
        scan_result, resolved_sets = find_resolved_sets(
            path,
            settings,
            workers=workers or settings.hash_workers,
            tie_break=tie_break or settings.tie_break,
            min_size=settings.min_file_size if min_size is None else min_size,
        )
        print_traversal_errors(scan_result)

        if not resolved_sets:
            print_success(f"No duplicates found among {len(scan_result.entries)} files!")
            return

        total_rejects = sum(len(r.rejects) for r in resolved_sets)
        total_wasted = sum(r.wasted_size for r in resolved_sets)

        if dry_run:
            print_warning("[DRY RUN MODE] Showing duplicates - no files will be moved")
        else:
            if not yes and not typer.confirm(
                f"Move {total_rejects} files into {settings.reject_folder} folders?",
                default=False,
            ):
                print_info("Cancelled.")
                return
            print_info(f"Moving duplicates into {settings.reject_folder} folders")

        mover = QuarantineMover(settings.reject_folder)
        moved = 0
        for resolved in resolved_sets:
            report = mover.relocate(resolved, dry_run=dry_run)
            moved += report.moved_count
            print_set_report(report)

        summary_text = f"""
Files scanned: {len(scan_result.entries):,}
Duplicate sets: {len(resolved_sets):,}
Duplicate files: {total_rejects:,}
Files moved: {moved:,}
Wasted space: {naturalsize(total_wasted)}
"""
        print_panel("Scan Summary", summary_text.strip(), style="green")

        if dry_run:
            print_info("To move the duplicates, run:")
            print_path(f"media-dedup scan --execute {path}", indent=2)

    except QuarantineError as e:
        if e.report is not None and e.report.relocations:
            print_set_report(e.report)
        print_error(f"Error: {e}")
        exit_code = 1
    except MediaDedupError as e:
        print_error(f"Error: {e}")
        exit_code = 1
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        exit_code = 1

    if exit_code:
        raise typer.Exit(exit_code)
