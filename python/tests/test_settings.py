"""Size bound helpers used by callers before starting a game."""

from __future__ import annotations

import pytest

from numberslider.errors import InvalidDimension
from numberslider.settings import (
    MAX_DIMS,
    MIN_DIMS,
    clamp_dimension,
    validate_dimensions,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (-5, MIN_DIMS),
        (0, MIN_DIMS),
        (2, 2),
        (17, 17),
        (30, 30),
        (31, MAX_DIMS),
        (999, MAX_DIMS),
    ],
)
def test_clamp_dimension(value: int, expected: int) -> None:
    assert clamp_dimension(value) == expected


@pytest.mark.parametrize("rows, cols", [(2, 2), (4, 4), (30, 30), (2, 30)])
def test_validate_accepts_in_range(rows: int, cols: int) -> None:
    validate_dimensions(rows, cols)


def test_validate_rejects_rows() -> None:
    with pytest.raises(
        InvalidDimension, match="number of rows must be between 2 and 30"
    ):
        validate_dimensions(1, 4)


def test_validate_rejects_cols() -> None:
    with pytest.raises(
        InvalidDimension, match="number of columns must be between 2 and 30"
    ):
        validate_dimensions(4, 31)
