"""Tests for validator module."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from eqselect.validator import (
    VALID_EXTENSIONS,
    VALID_FILE_TYPES,
    check_player_available,
    is_valid_extension,
    split_filename,
)


# --- split_filename ---


def test_split_simple_name() -> None:
    assert split_filename("song.mp3") == ("song", "mp3")


def test_split_uses_last_dot() -> None:
    assert split_filename("dir.v2/show.part1.mkv") == ("dir.v2/show.part1", "mkv")


def test_split_without_dot() -> None:
    assert split_filename("noext") == ("", "")


@pytest.mark.parametrize("name", ["", "a", "..", ".a", "ab"])
def test_split_short_names(name: str) -> None:
    """Names of two characters or fewer never split."""
    assert split_filename(name) == ("", "")


def test_split_trailing_dot() -> None:
    assert split_filename("file.") == ("file", "")


# --- is_valid_extension ---


def test_allow_list_tokens() -> None:
    assert VALID_EXTENSIONS == {
        ".avi", ".flv", ".mkv", ".mov", ".mp3", ".mp4",
        ".mpeg", ".mpg", ".ogg", ".ts", ".wav", ".wmv",
    }
    assert set(VALID_FILE_TYPES.split()) == VALID_EXTENSIONS


@pytest.mark.parametrize("ext", sorted(VALID_EXTENSIONS))
def test_every_allowed_extension_is_valid(ext: str) -> None:
    assert is_valid_extension(f"x{ext}")


@pytest.mark.parametrize("name", ["noext", "a.xyz", "ab", "..", ".", "file.", "notes.txt"])
def test_rejected_names(name: str) -> None:
    assert not is_valid_extension(name)


def test_case_insensitive() -> None:
    assert is_valid_extension("LOUD.MP3")
    assert is_valid_extension("Clip.Mkv")


def test_whole_token_match_only() -> None:
    """Prefixes or extensions of allowed types are rejected."""
    assert not is_valid_extension("app.tsx")
    assert not is_valid_extension("movie.mp")
    assert not is_valid_extension("clip.mpe")


def test_nested_path_is_checked_on_last_component() -> None:
    assert is_valid_extension("season.1/episode.avi")
    assert not is_valid_extension("music.mp3/cover")


# --- check_player_available ---


def test_player_available_when_present() -> None:
    with patch("eqselect.validator.shutil.which", return_value="/usr/bin/vlc"):
        check_player_available("vlc")  # Should not raise


def test_player_available_when_missing() -> None:
    with patch("eqselect.validator.shutil.which", return_value=None):
        with pytest.raises(RuntimeError, match="vlc not found"):
            check_player_available("vlc")
