"""Shared test fixtures for eqselect."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest
from rich.logging import RichHandler


@pytest.fixture(autouse=True)
def _reset_root_logger() -> Iterator[None]:
    """Drop handlers installed by setup_logging during a test."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, (RichHandler, RotatingFileHandler)):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(logging.WARNING)


@pytest.fixture
def media_root(tmp_path: Path) -> Path:
    """Create an empty directory to scan."""
    d = tmp_path / "media"
    d.mkdir()
    return d


@pytest.fixture
def home_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at a temporary directory."""
    d = tmp_path / "home"
    d.mkdir()
    monkeypatch.setenv("HOME", str(d))
    monkeypatch.delenv("EQSELECT_PLAYER", raising=False)
    return d


@pytest.fixture
def history_file(tmp_path: Path) -> Path:
    """Return a history file path inside a temporary state directory."""
    d = tmp_path / "state"
    d.mkdir()
    return d / "exec.txt"
