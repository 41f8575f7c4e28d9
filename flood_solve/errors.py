from __future__ import annotations

from typing import Optional, Tuple


class FloodSolveError(Exception):
    """Base class for every error raised by flood_solve."""


class OutOfBoundsError(FloodSolveError, IndexError):
    def __init__(self, row: int, col: int, shape: Tuple[int, int]):
        self.row = row
        self.col = col
        self.shape = shape
        super().__init__(f"start ({row}, {col}) is outside a {shape[0]}x{shape[1]} grid")


class MalformedInputError(FloodSolveError, ValueError):
    pass


class EmptyGridError(FloodSolveError, ValueError):
    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        super().__init__(f"grid must have at least one row and one column, got {rows}x{cols}")


class SearchBudgetExceeded(FloodSolveError, RuntimeError):
    def __init__(self, max_depth: int, message: Optional[str] = None):
        self.max_depth = max_depth
        super().__init__(message or f"no solution within max_depth={max_depth}")
