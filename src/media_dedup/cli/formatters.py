"""Rich formatting utilities for terminal output."""

from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from ..detector.progress import ProgressReporter

console = Console()


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print error message."""
    console.print(f"[red]✗[/red] {escape(message)}", style="red")


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[yellow]⚠[/yellow] {message}", style="yellow")


def print_info(message: str) -> None:
    """Print info message."""
    console.print(f"[blue]ℹ[/blue] {message}")


def print_path(path: str, style: Optional[str] = None, indent: int = 0) -> None:
    """Print a path on one line, without markup or wrapping."""
    console.print(" " * indent + escape(path), style=style, soft_wrap=True, highlight=False)


def print_panel(title: str, content: str, style: str = "blue") -> None:
    """Print content in a panel.

    Args:
        title: Panel title
        content: Panel content
        style: Panel border style
    """
    console.print(Panel(content, title=title, border_style=style))


def create_progress() -> Progress:
    """Create a progress bar with common columns.

    Returns:
        Configured Progress instance
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TextColumn("[yellow]{task.fields[duplicates]} dup[/yellow]"),
        TextColumn("[red]{task.fields[errors]} err[/red]"),
        TimeElapsedColumn(),
        console=console,
    )


def create_table(title: Optional[str] = None, **kwargs: Any) -> Table:
    """Create a Rich table with common styling.

    Args:
        title: Optional table title
        **kwargs: Additional Table arguments

    Returns:
        Configured Table instance
    """
    return Table(title=title, show_header=True, header_style="bold cyan", **kwargs)


class RichProgressReporter(ProgressReporter):
    """Shows pass events as a task of a rich Progress display."""

    def __init__(self, progress: Progress, description: str) -> None:
        self.progress = progress
        self.description = description
        self.task: Optional[TaskID] = None
        self.duplicates = 0
        self.errors = 0

    def phase_started(self, total: Optional[int]) -> None:
        if self.task is None:
            self.task = self.progress.add_task(
                self.description, total=total, duplicates=0, errors=0
            )
        else:
            self.progress.update(self.task, total=total)

    def item_processed(self, is_duplicate: bool) -> None:
        if self.task is None:
            self.phase_started(None)
        if is_duplicate:
            self.duplicates += 1
        self.progress.update(self.task, advance=1, duplicates=self.duplicates)

    def error_occurred(self) -> None:
        if self.task is None:
            self.phase_started(None)
        self.errors += 1
        self.progress.update(self.task, errors=self.errors)
