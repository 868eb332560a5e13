"""Number Slider — a sliding-tile puzzle engine for R×C grids."""

from numberslider.engine.gameplay import GamePlay
from numberslider.errors import IllegalMove, InvalidDimension, PuzzleError
from numberslider.models import Grid, MoveResult

__all__ = [
    "GamePlay",
    "Grid",
    "IllegalMove",
    "InvalidDimension",
    "MoveResult",
    "PuzzleError",
]
