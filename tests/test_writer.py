"""Tests for spritegen.writer."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from spritegen.hashing import content_hash
from spritegen.writer import write_if_changed


def test_write_if_changed_creates_missing_file_and_parents(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "dir" / "icons.ts"

    assert write_if_changed(target, "export const icons = [];\n") is True
    assert target.read_text(encoding="utf-8") == "export const icons = [];\n"


def test_write_if_changed_skips_identical_content(tmp_path: Path) -> None:
    target = tmp_path / "icons.ts"
    target.write_text("same\n", encoding="utf-8")
    before = target.stat().st_mtime_ns

    assert write_if_changed(target, "same\n") is False
    assert target.stat().st_mtime_ns == before


def test_write_if_changed_rewrites_different_content(tmp_path: Path) -> None:
    target = tmp_path / "icons.ts"
    target.write_text("old\n", encoding="utf-8")

    assert write_if_changed(target, "new\n") is True
    assert target.read_text(encoding="utf-8") == "new\n"


def test_write_if_changed_force_always_writes(tmp_path: Path) -> None:
    target = tmp_path / "icons.ts"
    target.write_text("same\n", encoding="utf-8")

    assert write_if_changed(target, "same\n", force=True) is True
    assert target.read_text(encoding="utf-8") == "same\n"


def test_write_if_changed_compares_expected_hash_against_existing(tmp_path: Path) -> None:
    target = tmp_path / "sprite.svg"
    target.write_text("<svg>one</svg>", encoding="utf-8")

    assert write_if_changed(target, "<svg>one</svg>", expected_hash=content_hash("<svg>one</svg>")) is False
    assert write_if_changed(target, "<svg>two</svg>", expected_hash=content_hash("<svg>two</svg>")) is True
    assert target.read_text(encoding="utf-8") == "<svg>two</svg>"


def test_write_if_changed_with_hash_writes_missing_file(tmp_path: Path) -> None:
    target = tmp_path / "sprite.svg"

    assert write_if_changed(target, "<svg/>", expected_hash=content_hash("<svg/>")) is True
    assert target.exists()


def test_write_if_changed_ignores_missing_file_with_empty_content(tmp_path: Path) -> None:
    target = tmp_path / "empty.ts"

    assert write_if_changed(target, "") is False
    assert not target.exists()


def test_write_if_changed_leaves_no_temporary_files(tmp_path: Path) -> None:
    target = tmp_path / "icons.ts"
    write_if_changed(target, "a\n")
    write_if_changed(target, "b\n")

    assert sorted(p.name for p in tmp_path.iterdir()) == ["icons.ts"]


@pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
def test_write_if_changed_creates_readable_files(tmp_path: Path) -> None:
    target = tmp_path / "sprite.svg"
    write_if_changed(target, "<svg/>")

    assert stat.S_IMODE(target.stat().st_mode) == 0o644


def test_write_if_changed_propagates_io_errors(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("file", encoding="utf-8")

    with pytest.raises(OSError):
        write_if_changed(blocker / "icons.ts", "content")


def test_write_if_changed_replaces_undecodable_file(tmp_path: Path) -> None:
    target = tmp_path / "icons.ts"
    target.write_bytes(b"\x80\x81")

    assert write_if_changed(target, "export const icons = [];\n") is True
    assert target.read_text(encoding="utf-8") == "export const icons = [];\n"
