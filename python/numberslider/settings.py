"""Grid size bounds and defaults shared by the engine and its callers."""

from __future__ import annotations

from numberslider.errors import InvalidDimension

# Inclusive bounds for the number of rows / columns a player may request.
MIN_DIMS = 2
MAX_DIMS = 30

DEFAULT_ROWS = 4
DEFAULT_COLS = 4

# Largest tile count the engine will build (tile values must fit in 32 bits).
MAX_TILE_COUNT = 2**31 - 1


def clamp_dimension(value: int) -> int:
    """Clamp a requested row/column count into ``[MIN_DIMS, MAX_DIMS]``."""
    return max(MIN_DIMS, min(MAX_DIMS, value))


def validate_dimensions(rows: int, cols: int) -> None:
    """Reject a requested size that lies outside the configured bounds.

    Raises :class:`InvalidDimension` with a message suitable for showing
    to the player as-is.
    """
    for name, value in (("rows", rows), ("columns", cols)):
        if not MIN_DIMS <= value <= MAX_DIMS:
            raise InvalidDimension(
                f"The number of {name} must be between {MIN_DIMS} and {MAX_DIMS}."
            )
