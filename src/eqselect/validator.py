"""Media extension checks and player lookup."""

from __future__ import annotations

import shutil

VALID_FILE_TYPES = ".avi .flv .mkv .mov .mp3 .mp4 .mpeg .mpg .ogg .ts .wav .wmv"

VALID_EXTENSIONS: frozenset[str] = frozenset(VALID_FILE_TYPES.split())


def split_filename(filename: str) -> tuple[str, str]:
    """Split a filename at its last dot into (base, extension).

    The extension is returned without the dot. Names of two characters or
    fewer, and names without a dot, give ("", "").
    """
    if len(filename) <= 2:
        return "", ""
    base, dot, ext = filename.rpartition(".")
    if not dot:
        return "", ""
    return base, ext


def is_valid_extension(filename: str) -> bool:
    """Return True if the filename ends in one of the allowed media types.

    The extension is compared case-insensitively as a whole token, so ".ts"
    does not match ".tsx".
    """
    _, ext = split_filename(filename)
    if not ext:
        return False
    return f".{ext}".lower() in VALID_EXTENSIONS


def check_player_available(player: str) -> None:
    """Verify that the player is on PATH. Raises RuntimeError if not found."""
    if shutil.which(player) is None:
        raise RuntimeError(f"{player} not found on PATH.")
