"""Parity-based solvability check for sliding puzzle arrangements."""

from __future__ import annotations

from collections.abc import Sequence

from numberslider.models.grid import Grid


class SolvabilityChecker:
    """Stateless checker — all methods are static."""

    @staticmethod
    def count_inversions(cells: Sequence[int]) -> int:
        """Count out-of-order pairs among the non-blank values."""
        flat = [v for v in cells if v != 0]
        inversions = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    inversions += 1
        return inversions

    @staticmethod
    def blank_row_from_bottom(grid: Grid) -> int:
        """Number of rows below the blank (0 when it sits on the bottom row)."""
        return grid.rows - 1 - grid.blank_pos[0]

    @staticmethod
    def is_solvable(grid: Grid) -> bool:
        """Return True if *grid* can reach the goal state.

        * odd width: inversions must be even
        * even width: inversions + blank row (counted from the bottom) must
          be even
        * single row or column: tiles can never overtake each other, so
          they must already be in ascending order
        """
        if grid.rows == 1 or grid.cols == 1:
            tiles = [v for v in grid.cells if v != 0]
            return tiles == sorted(tiles)

        inversions = SolvabilityChecker.count_inversions(grid.cells)
        if grid.cols % 2 == 1:
            return inversions % 2 == 0
        blank_row = SolvabilityChecker.blank_row_from_bottom(grid)
        return (inversions + blank_row) % 2 == 0
