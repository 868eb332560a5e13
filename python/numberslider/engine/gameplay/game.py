"""Core gameplay logic — processes moves and checks win condition."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from numberslider.engine.gamegenerator import GameGenerator
from numberslider.engine.gamestate import GameState
from numberslider.errors import IllegalMove
from numberslider.models.grid import Grid, MoveResult

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session.

    The grid is generated with *rng*, which is kept for later restarts so a
    seeded ``random.Random`` makes a whole session reproducible.
    """

    def __init__(self, rows: int, cols: int, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        grid = GameGenerator.generate(rows, cols, self.rng)
        self.state = GameState(grid)

    @classmethod
    def from_grid(cls, grid: Grid, rng: random.Random | None = None) -> GamePlay:
        """Create a game session from an existing grid (e.g. a test fixture)."""
        obj = object.__new__(cls)
        obj.rng = rng if rng is not None else random.Random()
        obj.state = GameState(grid)
        return obj

    def restart(self, rows: int | None = None, cols: int | None = None) -> None:
        """Start over on a fresh grid, optionally with a new size."""
        rows = self.rows if rows is None else rows
        cols = self.cols if cols is None else cols
        grid = GameGenerator.generate(rows, cols, self.rng)
        self.state = GameState(grid)
        logger.debug(f"Restarted game on a {rows}x{cols} grid")

    # -- movement -------------------------------------------------------------

    def apply_move(self, position: int | Sequence[int]) -> MoveResult:
        """Slide the tile at *position* into the adjacent blank.

        *position* is a linear index or a ``(row, col)`` pair (any two-item
        sequence, so decoded JSON ``[row, col]`` works too). Raises
        :class:`IllegalMove` (leaving the grid untouched) if the tile does
        not share an edge with the blank.
        """
        grid = self.state.grid
        index = self._resolve(grid, position)

        if index is None or not grid.is_adjacent_to_blank(index):
            logger.debug(f"Rejected move at {position!r}, blank at {grid.blank_pos}")
            raise IllegalMove(position)

        grid.swap_with_blank(index)
        self.state.increment_moves()
        return MoveResult(moves=self.state.moves, solved=grid.is_solved())

    def movable_positions(self) -> list[int]:
        """Indices of the tiles that may currently be moved."""
        grid = self.state.grid
        return grid.neighbors(grid.blank_index)

    # -- queries --------------------------------------------------------------

    @property
    def grid(self) -> Grid:
        return self.state.grid

    @property
    def rows(self) -> int:
        return self.state.grid.rows

    @property
    def cols(self) -> int:
        return self.state.grid.cols

    @property
    def cells(self) -> list[int]:
        return list(self.state.grid.cells)

    @property
    def blank_index(self) -> int:
        return self.state.grid.blank_index

    @property
    def moves(self) -> int:
        return self.state.moves

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

    def is_tile_correct(self, index: int) -> bool:
        return self.state.grid.is_tile_correct(index)

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _resolve(grid: Grid, position: int | Sequence[int]) -> int | None:
        """Turn *position* into a linear index, or None if it is unusable."""
        if _is_index(position):
            return position if 0 <= position < grid.size else None
        if isinstance(position, Sequence) and not isinstance(position, str):
            if len(position) != 2 or not all(_is_index(v) for v in position):
                return None
            row, col = position
            if not (0 <= row < grid.rows and 0 <= col < grid.cols):
                return None
            return grid.index_of(row, col)
        return None


def _is_index(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
