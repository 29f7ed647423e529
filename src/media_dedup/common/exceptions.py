"""Custom exception hierarchy."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..detector.models import SetReport


class MediaDedupError(Exception):
    """Base exception for all media-dedup errors."""


class ScanError(MediaDedupError):
    """The scan root cannot be walked."""


class DetectionError(MediaDedupError):
    """Error during duplicate detection."""


class HashError(DetectionError):
    """A candidate could not be read while computing its digest."""

    def __init__(
        self,
        message: str,
        path: str,
        failures: Optional[list[tuple[str, Exception]]] = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.failures = failures or [(path, self)]


class ActionError(MediaDedupError):
    """Error performing file actions (mkdir, move)."""


class QuarantineError(ActionError):
    """A reject could not be relocated into its quarantine folder.

    ``report`` holds the relocations of the failing set that completed before
    the error, when the failure happened inside a set.
    """

    def __init__(
        self,
        message: str,
        path: str,
        report: Optional["SetReport"] = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.report = report


class ConfigError(MediaDedupError):
    """Configuration error."""
