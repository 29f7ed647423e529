"""Progress event sinks used by the passes."""

from typing import Optional


class ProgressReporter:
    """Receives discrete events from a pass.

    Passes only emit events; they never print. Implementations decide how to
    display them.
    """

    def phase_started(self, total: Optional[int]) -> None:
        """A pass is about to process ``total`` items (None if unknown)."""

    def item_processed(self, is_duplicate: bool) -> None:
        """An item was processed; ``is_duplicate`` if it matched an earlier one."""

    def error_occurred(self) -> None:
        """An item could not be processed."""


class NullReporter(ProgressReporter):
    """Discards every event."""


class CountingReporter(ProgressReporter):
    """Tallies events, for summaries and tests."""

    def __init__(self) -> None:
        self.total: Optional[int] = None
        self.processed = 0
        self.duplicates = 0
        self.errors = 0

    def phase_started(self, total: Optional[int]) -> None:
        self.total = total

    def item_processed(self, is_duplicate: bool) -> None:
        self.processed += 1
        if is_duplicate:
            self.duplicates += 1

    def error_occurred(self) -> None:
        self.errors += 1
