"""Number Slider developer CLI.

Usage::

    numberslider new                      # random 4×4 grid
    numberslider new -r 3 -c 5 --seed 7   # reproducible 3×5 grid
    numberslider new --format json
    numberslider check -c 3 1 2 3 4 5 6 8 7 0
"""

from __future__ import annotations

import json
import logging
import random
from enum import StrEnum
from typing import List, Optional

import typer

from numberslider.engine.gamegenerator import GameGenerator
from numberslider.engine.solvability import SolvabilityChecker
from numberslider.errors import PuzzleError
from numberslider.models.grid import Grid
from numberslider.settings import DEFAULT_COLS, DEFAULT_ROWS, MAX_DIMS, MIN_DIMS


class OutputFormat(StrEnum):
    text = "text"
    json = "json"


# -- helpers ------------------------------------------------------------------


def _render_text(grid: Grid) -> str:
    """Plain aligned dump of the grid, blank shown as a dot."""
    width = len(str(grid.size - 1))
    lines: list[str] = []
    for row in grid.tiles:
        lines.append(" ".join(f"{'·' if v == 0 else v:>{width}}" for v in row))
    return "\n".join(lines)


def _as_dict(grid: Grid) -> dict:
    return {
        "rows": grid.rows,
        "cols": grid.cols,
        "cells": grid.cells,
        "blank_index": grid.blank_index,
        "solvable": SolvabilityChecker.is_solvable(grid),
        "solved": grid.is_solved(),
    }


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log engine debug output.",
    ),
) -> None:
    """Number Slider puzzle tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def new(
    rows: int = typer.Option(
        DEFAULT_ROWS, "-r", "--rows",
        min=MIN_DIMS, max=MAX_DIMS,
        help=f"Number of rows ({MIN_DIMS}-{MAX_DIMS}).",
    ),
    cols: int = typer.Option(
        DEFAULT_COLS, "-c", "--cols",
        min=MIN_DIMS, max=MAX_DIMS,
        help=f"Number of columns ({MIN_DIMS}-{MAX_DIMS}).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible shuffle.",
    ),
    fmt: OutputFormat = typer.Option(
        OutputFormat.text, "-f", "--format",
        help="Output format.",
    ),
) -> None:
    """Generate a solvable grid and print it."""
    grid = GameGenerator.generate(rows, cols, random.Random(seed))
    if fmt is OutputFormat.json:
        typer.echo(json.dumps(_as_dict(grid)))
    else:
        typer.echo(_render_text(grid))


@app.command()
def check(
    cells: List[int] = typer.Argument(..., help="Cells in row-major order, 0 = blank."),
    cols: int = typer.Option(..., "-c", "--cols", help="Number of columns."),
) -> None:
    """Report whether an arrangement is solvable and whether it is solved."""
    if cols < 1 or len(cells) % cols:
        typer.echo(f"Error: {len(cells)} cells do not fill rows of {cols}.", err=True)
        raise typer.Exit(code=1)
    try:
        grid = Grid.from_flat(len(cells) // cols, cols, cells)
    except (PuzzleError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    inversions = SolvabilityChecker.count_inversions(grid.cells)
    typer.echo(f"Grid:       {grid.rows}x{grid.cols}")
    typer.echo(f"Inversions: {inversions}")
    typer.echo(f"Solvable:   {'yes' if SolvabilityChecker.is_solvable(grid) else 'no'}")
    typer.echo(f"Solved:     {'yes' if grid.is_solved() else 'no'}")


if __name__ == "__main__":
    app()
