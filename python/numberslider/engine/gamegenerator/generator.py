"""Generates solvable number slider grids."""

from __future__ import annotations

import logging
import random

from numberslider.engine.solvability import SolvabilityChecker
from numberslider.models.grid import Grid, check_dimensions

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles from a random permutation plus a parity fix."""

    @staticmethod
    def solved(rows: int, cols: int) -> Grid:
        """Return the goal-state grid (all tiles in order, blank bottom-right)."""
        return Grid.solved(rows, cols)

    @staticmethod
    def shuffle(rows: int, cols: int, rng: random.Random) -> Grid:
        """Return a uniformly random arrangement, solvable or not."""
        n = rows * cols
        cells = list(range(1, n))
        rng.shuffle(cells)
        cells.insert(rng.randrange(n), 0)
        return Grid(rows=rows, cols=cols, cells=cells, blank_index=cells.index(0))

    @staticmethod
    def generate(rows: int, cols: int, rng: random.Random | None = None) -> Grid:
        """Return a random *solvable* grid of the given size.

        The result may already be solved on tiny grids; that is not re-rolled.
        """
        check_dimensions(rows, cols)
        if rng is None:
            rng = random.Random()

        if rows == 1 or cols == 1:
            grid = GameGenerator._line(rows, cols, rng)
            logger.debug(
                f"Generated {rows}x{cols} line grid, blank at {grid.blank_index}"
            )
            return grid

        grid = GameGenerator.shuffle(rows, cols, rng)
        fixed = False
        if not SolvabilityChecker.is_solvable(grid):
            GameGenerator._flip_parity(grid)
            fixed = True

        assert SolvabilityChecker.is_solvable(grid), "parity fix failed"
        logger.debug(f"Generated {rows}x{cols} grid (parity fix applied: {fixed})")
        return grid

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _flip_parity(grid: Grid) -> None:
        """Swap the first two non-blank tiles, flipping inversion parity."""
        first, second = [i for i, v in enumerate(grid.cells) if v != 0][:2]
        grid.cells[first], grid.cells[second] = grid.cells[second], grid.cells[first]

    @staticmethod
    def _line(rows: int, cols: int, rng: random.Random) -> Grid:
        # Tiles in a single row/column can only slide, never reorder.
        n = rows * cols
        cells = list(range(1, n))
        cells.insert(rng.randrange(n), 0)
        return Grid(rows=rows, cols=cols, cells=cells, blank_index=cells.index(0))
