"""Pick an unplayed media file from a directory tree and play it."""

__version__ = "0.91.0"
