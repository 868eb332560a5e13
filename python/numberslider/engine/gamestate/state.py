"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from numberslider.models.grid import Grid


class GameState:
    """Holds the current grid and move counter."""

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self.moves: int = 0

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    @property
    def is_solved(self) -> bool:
        return self.grid.is_solved()
