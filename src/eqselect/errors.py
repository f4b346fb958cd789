"""Exceptions raised while selecting a file."""

from __future__ import annotations


class EqselectError(Exception):
    """Base class for fatal selection errors."""


class DirectoryAccessError(EqselectError):
    """The scan root cannot be opened."""


class SubdirectoryAccessError(EqselectError):
    """A nested directory cannot be opened. The walk skips it."""


class PersistenceError(EqselectError):
    """The state directory or history file cannot be written."""


class EmptyPopulationError(EqselectError):
    """No eligible file exists in the tree, even after a history reset."""


class PlayerLaunchError(EqselectError):
    """The player process could not be spawned."""


class EarlyStop(Exception):
    """Raised inside the walk once continuous mode has its candidate."""
