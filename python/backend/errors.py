"""Exceptions raised by the puzzle package."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(PuzzleError, ValueError):
    """A tile, board or puzzle file is malformed."""


class DimensionMismatchError(ConfigurationError):
    """The number of tiles differs from the number of grid cells."""

    def __init__(self, width: int, height: int, count: int) -> None:
        super().__init__(
            f"Expected {width * height} tiles for a {width}×{height} board, "
            f"got {count}."
        )
        self.width = width
        self.height = height
        self.count = count
