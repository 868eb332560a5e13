"""Exceptions raised by the puzzle engine."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for all puzzle engine errors."""


class InvalidDimension(PuzzleError, ValueError):
    """Raised when a grid is requested with unusable rows/cols."""


class IllegalMove(PuzzleError):
    """Raised when the selected tile is not edge-adjacent to the blank.

    The grid is left untouched, so callers can simply ignore stray clicks.
    """

    def __init__(self, position: object) -> None:
        super().__init__(f"Tile at {position!r} is not adjacent to the blank.")
        self.position = position
