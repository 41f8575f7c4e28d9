"""Flood-fill toolkit for character grids.

Modules:
- grid: grid model, region traversal, flood fill and adjacency scan
- search: exhaustive minimum-moves solver anchored at the top-left cell
- io: token reader and command input parsing
- cli: command-line entrypoint
- errors: error taxonomy
- config: defaults and output formats
"""

from .errors import EmptyGridError, FloodSolveError, MalformedInputError, OutOfBoundsError, SearchBudgetExceeded
from .grid import Fill, Grid, Program, adjacent_colors, copy_grid, flood_fill, grid_from_rows, is_uniform
from .search import MinMovesSolver, min_moves

__all__ = [
    "Grid",
    "Fill",
    "Program",
    "flood_fill",
    "adjacent_colors",
    "copy_grid",
    "grid_from_rows",
    "is_uniform",
    "MinMovesSolver",
    "min_moves",
    "FloodSolveError",
    "OutOfBoundsError",
    "MalformedInputError",
    "EmptyGridError",
    "SearchBudgetExceeded",
]
