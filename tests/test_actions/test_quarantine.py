"""Tests for the quarantine mover."""

import os
from pathlib import Path

import pytest

from media_dedup.actions.quarantine import QuarantineMover
from media_dedup.common.exceptions import QuarantineError
from media_dedup.detector.models import ResolvedSet


def _resolved(original: Path, *rejects: Path) -> ResolvedSet:
    return ResolvedSet(
        original=str(original),
        rejects=tuple(str(r) for r in rejects),
        digest=b"\x00" * 20,
        size=500,
    )


def test_quarantine_dir_is_next_to_original() -> None:
    """Quarantine folder lives in the original's directory."""
    mover = QuarantineMover()

    assert mover.quarantine_dir("a/2020-01-01/img.jpg") == Path("a/2020-01-01/_Rejected")
    assert QuarantineMover("_Dupes").quarantine_dir("x.jpg") == Path("_Dupes")


def test_destination_for() -> None:
    """Destination keeps the reject's stem and suffix around the number."""
    dest = QuarantineMover.destination_for("b/c/IMG_0001.JPG", Path("a/_Rejected"), 3)
    assert dest == Path("a/_Rejected/IMG_0001_3.JPG")

    dest = QuarantineMover.destination_for("b/backup.tar.gz", Path("q"), 1)
    assert dest == Path("q/backup.tar_1.gz")


def test_dry_run_does_not_touch_disk(write_file, tmp_path: Path) -> None:
    """Simulation reports destinations without creating or moving anything."""
    original = write_file("a/img.jpg")
    reject = write_file("a/copy/img.jpg")

    report = QuarantineMover().relocate(_resolved(original, reject), dry_run=True)

    assert not (tmp_path / "a" / "_Rejected").exists()
    assert reject.exists()
    assert len(report.relocations) == 1
    assert report.relocations[0].destination == str(tmp_path / "a" / "_Rejected" / "img_1.jpg")
    assert report.relocations[0].moved is False
    assert report.moved_count == 0


def test_live_moves_rejects(write_file, tmp_path: Path) -> None:
    """Original stays, rejects end up numbered in the quarantine folder."""
    original = write_file("a/img.jpg")
    rejects = [write_file("a/copy/img.jpg"), write_file("a/copy2/img.jpg"), write_file("b/pic.jpg")]

    report = QuarantineMover().relocate(_resolved(original, *rejects), dry_run=False)

    quarantine = tmp_path / "a" / "_Rejected"
    assert original.exists()
    assert all(not r.exists() for r in rejects)
    assert sorted(os.listdir(quarantine)) == ["img_1.jpg", "img_2.jpg", "pic_3.jpg"]
    assert [r.destination for r in report.relocations] == [
        str(quarantine / "img_1.jpg"),
        str(quarantine / "img_2.jpg"),
        str(quarantine / "pic_3.jpg"),
    ]
    assert report.moved_count == 3


def test_existing_quarantine_folder_is_reused(write_file, tmp_path: Path) -> None:
    """An already existing folder is not an error and earlier files are kept."""
    original = write_file("a/img.jpg")
    reject = write_file("a/copy/img.jpg")
    previous = write_file("a/_Rejected/img_1.jpg", b"older run")

    report = QuarantineMover().relocate(_resolved(original, reject), dry_run=False)

    assert previous.read_bytes() == b"older run"
    assert report.relocations[0].destination == str(tmp_path / "a" / "_Rejected" / "img_2.jpg")
    assert (tmp_path / "a" / "_Rejected" / "img_2.jpg").exists()


def test_destinations_unique_across_sets(write_file, tmp_path: Path) -> None:
    """Two sets sharing a quarantine folder never claim the same name."""
    mover = QuarantineMover()
    first = _resolved(write_file("a/x.jpg", b"1"), write_file("b/img.jpg", b"1"))
    second = _resolved(write_file("a/y.jpg", b"2"), write_file("c/img.jpg", b"2"))

    r1 = mover.relocate(first, dry_run=False)
    r2 = mover.relocate(second, dry_run=False)

    assert r1.relocations[0].destination != r2.relocations[0].destination
    assert (tmp_path / "a" / "_Rejected" / "img_1.jpg").read_bytes() == b"1"
    assert (tmp_path / "a" / "_Rejected" / "img_2.jpg").read_bytes() == b"2"


def test_dry_run_plans_same_names_as_live(write_file) -> None:
    """Simulation and live runs agree on destinations."""
    original = write_file("a/img.jpg")
    rejects = [write_file("a/copy/img.jpg"), write_file("b/img.jpg")]
    resolved = _resolved(original, *rejects)

    planned = QuarantineMover().relocate(resolved, dry_run=True)
    moved = QuarantineMover().relocate(resolved, dry_run=False)

    assert [r.destination for r in planned.relocations] == [
        r.destination for r in moved.relocations
    ]


def test_no_rejects_creates_nothing(write_file, tmp_path: Path) -> None:
    """A set without rejects leaves the disk alone."""
    original = write_file("a/img.jpg")

    report = QuarantineMover().relocate(_resolved(original), dry_run=False)

    assert report.relocations == []
    assert not (tmp_path / "a" / "_Rejected").exists()


def test_folder_creation_failure(write_file) -> None:
    """A file squatting on the folder name is fatal."""
    original = write_file("a/img.jpg")
    reject = write_file("b/img.jpg")
    write_file("a/_Rejected", b"not a directory")

    with pytest.raises(QuarantineError) as exc_info:
        QuarantineMover().relocate(_resolved(original, reject), dry_run=False)

    assert exc_info.value.path.endswith("_Rejected")
    assert reject.exists()


def test_move_failure(write_file, tmp_path: Path) -> None:
    """A reject that vanished before the move is fatal."""
    original = write_file("a/img.jpg")
    missing = tmp_path / "b" / "img.jpg"

    with pytest.raises(QuarantineError) as exc_info:
        QuarantineMover().relocate(_resolved(original, missing), dry_run=False)

    assert exc_info.value.path == str(missing)


def test_move_failure_keeps_partial_report(write_file, tmp_path: Path) -> None:
    """A failing move carries the relocations already done for its set."""
    original = write_file("a/img.jpg")
    first = write_file("a/copy/img.jpg")
    missing = tmp_path / "b" / "img.jpg"

    with pytest.raises(QuarantineError) as exc_info:
        QuarantineMover().relocate(_resolved(original, first, missing), dry_run=False)

    report = exc_info.value.report
    destination = tmp_path / "a" / "_Rejected" / "img_1.jpg"
    assert report is not None
    assert report.original == str(original)
    assert [(r.source, r.destination) for r in report.relocations] == [
        (str(first), str(destination))
    ]
    assert report.moved_count == 1
    assert destination.exists()
    assert not first.exists()


def test_folder_creation_failure_has_empty_report(write_file) -> None:
    """Nothing moved yet when the folder cannot be created."""
    original = write_file("a/img.jpg")
    reject = write_file("b/img.jpg")
    write_file("a/_Rejected", b"not a directory")

    with pytest.raises(QuarantineError) as exc_info:
        QuarantineMover().relocate(_resolved(original, reject), dry_run=False)

    assert exc_info.value.report is not None
    assert exc_info.value.report.relocations == []


def test_claimed_names_ignore_case_where_the_os_does(
    write_file, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Names differing only in case are one name on case-insensitive systems."""
    mover = QuarantineMover()
    first = _resolved(write_file("a/x.jpg", b"1"), write_file("b/IMG.jpg", b"1"))
    second = _resolved(write_file("a/y.jpg", b"2"), write_file("c/img.jpg", b"2"))

    with monkeypatch.context() as m:
        m.setattr(os.path, "normcase", lambda p: p.lower())
        r1 = mover.relocate(first, dry_run=True)
        r2 = mover.relocate(second, dry_run=True)

    quarantine = tmp_path / "a" / "_Rejected"
    assert r1.relocations[0].destination == str(quarantine / "IMG_1.jpg")
    assert r2.relocations[0].destination == str(quarantine / "img_2.jpg")


def test_claimed_names_keep_case_on_posix(write_file, tmp_path: Path) -> None:
    """Without case folding, names differing in case do not collide."""
    if os.path.normcase("A") != "A":
        pytest.skip("file system names are case-folded here")
    mover = QuarantineMover()
    first = _resolved(write_file("a/x.jpg", b"1"), write_file("b/IMG.jpg", b"1"))
    second = _resolved(write_file("a/y.jpg", b"2"), write_file("c/img.jpg", b"2"))

    mover.relocate(first, dry_run=True)
    r2 = mover.relocate(second, dry_run=True)

    assert r2.relocations[0].destination == str(tmp_path / "a" / "_Rejected" / "img_1.jpg")
