from numberslider.models.grid import Grid, MoveResult

__all__ = ["Grid", "MoveResult"]
