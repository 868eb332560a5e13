"""Grid model for the number slider puzzle."""

from __future__ import annotations

from dataclasses import dataclass

from numberslider.errors import InvalidDimension
from numberslider.settings import MAX_TILE_COUNT


def check_dimensions(rows: int, cols: int) -> None:
    """Raise :class:`InvalidDimension` unless *rows* × *cols* is buildable."""
    for name, value in (("rows", rows), ("cols", cols)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDimension(f"{name} must be an integer, got {value!r}.")
        if value < 1:
            raise InvalidDimension(f"{name} must be at least 1, got {value}.")
    if rows * cols > MAX_TILE_COUNT:
        raise InvalidDimension(
            f"A {rows}×{cols} grid has more than {MAX_TILE_COUNT} tiles."
        )


@dataclass(frozen=True)
class MoveResult:
    """Outcome of an applied move: the new move count and the win flag."""

    moves: int
    solved: bool


@dataclass
class Grid:
    """Represents the sliding puzzle grid.

    Cells are stored as a flat row-major list of ints. 0 represents the
    blank slot; ``blank_index`` caches its position.
    """

    rows: int
    cols: int
    cells: list[int]
    blank_index: int

    def __post_init__(self) -> None:
        check_dimensions(self.rows, self.cols)
        n = self.rows * self.cols
        if len(self.cells) != n:
            raise ValueError(
                f"Expected {n} cells for a {self.rows}×{self.cols} grid, "
                f"got {len(self.cells)}."
            )
        if sorted(self.cells) != list(range(n)):
            raise ValueError(f"Cells must be a permutation of 0..{n - 1}.")
        if not 0 <= self.blank_index < n or self.cells[self.blank_index] != 0:
            raise ValueError(
                f"blank_index {self.blank_index} does not point at the blank."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, rows: int, cols: int) -> Grid:
        """Return the goal arrangement (ascending tiles, blank last)."""
        check_dimensions(rows, cols)
        n = rows * cols
        cells = [(i + 1) % n for i in range(n)]
        return cls(rows=rows, cols=cols, cells=cells, blank_index=n - 1)

    @classmethod
    def from_flat(cls, rows: int, cols: int, flat: list[int]) -> Grid:
        """Create a grid from a flat row-major cell list.

        Example::

            Grid.from_flat(3, 3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        cells = list(flat)
        blank_index = cells.index(0) if 0 in cells else -1
        return cls(rows=rows, cols=cols, cells=cells, blank_index=blank_index)

    # -- coordinates ----------------------------------------------------------

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def position(self, index: int) -> tuple[int, int]:
        """Return the ``(row, col)`` of linear *index*."""
        if not 0 <= index < self.size:
            raise IndexError(
                f"Index {index} is outside a {self.rows}×{self.cols} grid."
            )
        return divmod(index, self.cols)

    def index_of(self, row: int, col: int) -> int:
        """Return the linear index of ``(row, col)``."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(
                f"Cell ({row}, {col}) is outside a {self.rows}×{self.cols} grid."
            )
        return row * self.cols + col

    @property
    def blank_pos(self) -> tuple[int, int]:
        return self.position(self.blank_index)

    @property
    def tiles(self) -> list[list[int]]:
        """Row-by-row copy of the cells, handy for rendering."""
        return [
            self.cells[r * self.cols : (r + 1) * self.cols] for r in range(self.rows)
        ]

    # -- queries --------------------------------------------------------------

    def neighbors(self, index: int) -> list[int]:
        """Indices sharing an edge with *index* (no diagonals, no row wrap)."""
        r, c = self.position(index)
        result: list[int] = []
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = r + dr, c + dc
            if 0 <= nr < self.rows and 0 <= nc < self.cols:
                result.append(nr * self.cols + nc)
        return result

    def is_adjacent_to_blank(self, index: int) -> bool:
        if not 0 <= index < self.size:
            return False
        row, col = divmod(index, self.cols)
        br, bc = self.blank_pos
        return (row == br and abs(col - bc) == 1) or (
            col == bc and abs(row - br) == 1
        )

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        n = self.size
        return all(v == (i + 1) % n for i, v in enumerate(self.cells))

    def is_tile_correct(self, index: int) -> bool:
        """Check if the value at *index* is the one the goal state puts there."""
        self.position(index)
        return self.cells[index] == (index + 1) % self.size

    # -- mutation -------------------------------------------------------------

    def swap_with_blank(self, index: int) -> None:
        """Swap the value at *index* into the blank slot.

        No adjacency check here; callers decide which swaps are legal.
        Raises ``ValueError`` without touching the cells if ``blank_index``
        no longer points at the blank.
        """
        self.position(index)
        b = self.blank_index
        if self.cells[b] != 0:
            raise ValueError(f"blank_index {b} does not point at the blank.")
        self.cells[b], self.cells[index] = self.cells[index], self.cells[b]
        self.blank_index = index

    def copy(self) -> Grid:
        return Grid(
            rows=self.rows,
            cols=self.cols,
            cells=self.cells[:],
            blank_index=self.blank_index,
        )
