"""Extension allow-list."""

import os
from typing import Iterable, Optional

from ..common.constants import VALID_EXTENSIONS


class ExtensionFilter:
    """Accepts file names whose last suffix is in the allow-list, ignoring case."""

    def __init__(self, extensions: Optional[Iterable[str]] = None) -> None:
        """Initialize filter.

        Args:
            extensions: Allowed suffixes such as ``.jpg``; defaults to VALID_EXTENSIONS
        """
        if extensions is None:
            extensions = VALID_EXTENSIONS
        self.extensions = frozenset(
            ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in extensions
        )

    def accepts(self, path: str) -> bool:
        """Check whether ``path`` has an allowed suffix."""
        return os.path.splitext(path)[1].lower() in self.extensions

    def __contains__(self, path: str) -> bool:
        return self.accepts(path)
