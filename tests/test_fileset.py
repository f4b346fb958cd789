"""Tests for fileset module."""

from __future__ import annotations

import pytest

from eqselect.fileset import MAX_FILENAME_BYTES, FileSet, fits_path_bound


class TestFileSet:
    def test_empty(self) -> None:
        fs = FileSet()
        assert len(fs) == 0
        assert fs.count == 0
        assert fs.last() is None
        assert not fs.contains("a.mp3")

    def test_add_preserves_order(self) -> None:
        fs = FileSet()
        for name in ("b.mp3", "a.mp3", "c.mp3"):
            fs.add(name)
        assert list(fs) == ["b.mp3", "a.mp3", "c.mp3"]
        assert fs.item_at(0) == "b.mp3"
        assert fs[2] == "c.mp3"
        assert fs.last() == "c.mp3"

    def test_contains_is_exact_and_case_sensitive(self) -> None:
        fs = FileSet(["dir/Song.mp3"])
        assert "dir/Song.mp3" in fs
        assert "dir/song.mp3" not in fs
        assert "Song.mp3" not in fs
        assert "dir/Song.mp3 " not in fs

    def test_contains_non_string(self) -> None:
        fs = FileSet(["1.mp3"])
        assert 1 not in fs

    def test_duplicates_are_kept(self) -> None:
        fs = FileSet(["a.mp3", "a.mp3"])
        assert len(fs) == 2

    def test_many_items(self) -> None:
        names = [f"track{i:04d}.ogg" for i in range(1000)]
        fs = FileSet(names)
        assert len(fs) == 1000
        assert all(name in fs for name in names[::97])
        assert fs.last() == "track0999.ogg"

    def test_item_at_out_of_range(self) -> None:
        fs = FileSet(["a.mp3"])
        with pytest.raises(IndexError):
            fs.item_at(1)
        with pytest.raises(IndexError):
            fs[-1]

    def test_clear(self) -> None:
        fs = FileSet(["a.mp3", "b.mp3"])
        fs.clear()
        assert len(fs) == 0
        assert "a.mp3" not in fs
        fs.add("c.mp3")
        assert list(fs) == ["c.mp3"]

    def test_add_rejects_overlong_name(self) -> None:
        fs = FileSet()
        with pytest.raises(ValueError, match="exceeds"):
            fs.add("a" * MAX_FILENAME_BYTES + ".mp3")
        assert len(fs) == 0


class TestPathBound:
    def test_longest_allowed(self) -> None:
        assert fits_path_bound("a" * (MAX_FILENAME_BYTES - 1))

    def test_at_bound_rejected(self) -> None:
        assert not fits_path_bound("a" * MAX_FILENAME_BYTES)

    def test_counts_bytes_not_characters(self) -> None:
        # "é" is two bytes in UTF-8.
        name = "é" * (MAX_FILENAME_BYTES // 2)
        assert len(name) < MAX_FILENAME_BYTES
        assert not fits_path_bound(name)
