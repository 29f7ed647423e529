"""Shared pytest fixtures."""

import logging
from pathlib import Path
from typing import Callable, Iterator

import pytest

from media_dedup.config.settings import reset_settings
from media_dedup.detector.models import DuplicateSet


@pytest.fixture(autouse=True)
def clean_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Fresh settings and no leftover log handlers for every test."""
    for name in ("EXTENSIONS", "REJECT_FOLDER", "HASH_WORKERS", "TIE_BREAK", "MIN_FILE_SIZE"):
        monkeypatch.delenv(f"MEDIA_DEDUP_{name}", raising=False)
    reset_settings()
    yield
    reset_settings()
    logging.getLogger().handlers.clear()


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[..., Path]:
    """Create a file below tmp_path, 500 bytes of b"x" unless told otherwise."""

    def _write(relative: str, content: bytes = b"x" * 500) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path

    return _write


@pytest.fixture
def sample_set() -> DuplicateSet:
    """A duplicate set of three paths of different lengths."""
    return DuplicateSet(
        digest=b"\x01" * 20,
        size=1024,
        paths=(
            "/photos/2020-01-01/copy/img.jpg",
            "/photos/2020-01-01/img.jpg",
            "/photos/import/2020-01-01/img.jpg",
        ),
    )
