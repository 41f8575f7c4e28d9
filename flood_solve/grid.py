from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .config import TOP_LEFT
from .errors import EmptyGridError, MalformedInputError, OutOfBoundsError


logger = logging.getLogger(__name__)

# Grid represented as list of rows, each row a list of one-character color symbols
Grid = List[List[str]]


def grid_size(grid: Grid) -> Tuple[int, int]:
    if not grid:
        return 0, 0
    return len(grid), len(grid[0])


def copy_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def grid_from_rows(rows: Iterable[str]) -> Grid:
    return [list(row) for row in rows]


def grid_key(grid: Grid) -> Tuple[str, ...]:
    return tuple("".join(row) for row in grid)


def validate_grid(grid: Grid) -> None:
    """Check that a grid is a non-empty rectangle of single-character symbols."""
    h, w = grid_size(grid)
    if h == 0 or w == 0:
        raise EmptyGridError(h, w)
    for r, row in enumerate(grid):
        if len(row) != w:
            raise MalformedInputError(f"row {r} has {len(row)} cells, expected {w}")
        for c, cell in enumerate(row):
            if not isinstance(cell, str) or len(cell) != 1:
                raise MalformedInputError(f"cell ({r}, {c}) is not a single color symbol: {cell!r}")


def in_bounds(grid: Grid, row: int, col: int) -> bool:
    h, w = grid_size(grid)
    return 0 <= row < h and 0 <= col < w


def is_uniform(grid: Grid) -> bool:
    h, w = grid_size(grid)
    if h == 0 or w == 0:
        return True
    first = grid[0][0]
    return all(cell == first for row in grid for cell in row)


def _check_start(grid: Grid, row: int, col: int) -> None:
    if not in_bounds(grid, row, col):
        raise OutOfBoundsError(row, col, grid_size(grid))


def _neighbors4(r: int, c: int) -> Iterable[Tuple[int, int]]:
    # down, up, right, left
    yield r + 1, c
    yield r - 1, c
    yield r, c + 1
    yield r, c - 1


NeighborFunc = Callable[[int, int], Iterable[Tuple[int, int]]]


# ------------------------------
# Region traversal
# ------------------------------


def _fill_region(
    grid: Grid,
    row: int,
    col: int,
    initial_color: str,
    replacement_color: str,
    neighbors: NeighborFunc = _neighbors4,
) -> int:
    """Overwrite the 4-connected region of `initial_color` around (row, col).

    Every matching cell is written and counted, including when the replacement
    equals the initial color: a same-color fill reports the full region size.
    """
    h, w = grid_size(grid)
    visited = np.zeros((h, w), dtype=bool)
    stack = [(row, col)]
    num_replaced = 0
    while stack:
        r, c = stack.pop()
        if not (0 <= r < h and 0 <= c < w) or visited[r, c]:
            continue
        if grid[r][c] != initial_color:
            continue
        visited[r, c] = True
        grid[r][c] = replacement_color
        num_replaced += 1
        # reversed so pops come out in the order neighbors yields them
        stack.extend(reversed(list(neighbors(r, c))))
    return num_replaced


def _collect_border(
    grid: Grid, row: int, col: int, initial_color: str, neighbors: NeighborFunc = _neighbors4
) -> List[str]:
    """Return the colors met at the border of the region, in visiting order.

    Duplicates are kept; see `filter_colors`.
    """
    h, w = grid_size(grid)
    visited = np.zeros((h, w), dtype=bool)
    stack = [(row, col)]
    found: List[str] = []
    while stack:
        r, c = stack.pop()
        if not (0 <= r < h and 0 <= c < w) or visited[r, c]:
            continue
        visited[r, c] = True
        current = grid[r][c]
        if current != initial_color:
            found.append(current)
            continue
        stack.extend(reversed(list(neighbors(r, c))))
    return found


def filter_colors(colors: Iterable[str]) -> List[str]:
    return sorted(set(colors))


# ------------------------------
# Public operations
# ------------------------------


def flood_fill(grid: Grid, row: int, col: int, replacement_color: str) -> int:
    """Recolor the region containing (row, col) in place.

    Returns the number of cells written. The start must be inside the grid;
    nothing is modified when it is not.
    """
    _check_start(grid, row, col)
    if not isinstance(replacement_color, str) or len(replacement_color) != 1:
        raise MalformedInputError(f"replacement color must be a single symbol, got {replacement_color!r}")
    initial_color = grid[row][col]
    count = _fill_region(grid, row, col, initial_color, replacement_color)
    logger.debug("fill (%d, %d) %s -> %s: %d cells", row, col, initial_color, replacement_color, count)
    return count


def adjacent_colors(grid: Grid, row: int, col: int, initial_color: Optional[str] = None) -> List[str]:
    """Distinct colors bordering the region at (row, col), sorted ascending."""
    _check_start(grid, row, col)
    if initial_color is None:
        initial_color = grid[row][col]
    return filter_colors(_collect_border(grid, row, col, initial_color))


# ------------------------------
# Fill operations
# ------------------------------


@dataclass(frozen=True)
class Fill:
    color: str
    row: int = TOP_LEFT[0]
    col: int = TOP_LEFT[1]

    def apply(self, grid: Grid) -> Grid:
        out = copy_grid(grid)
        flood_fill(out, self.row, self.col, self.color)
        return out

    def signature(self) -> str:
        return f"fill({self.row},{self.col},{self.color})"


@dataclass
class Program:
    steps: List[Fill]

    @classmethod
    def from_colors(cls, colors: Sequence[str]) -> "Program":
        return cls([Fill(color) for color in colors])

    def apply(self, grid: Grid) -> Grid:
        out = copy_grid(grid)
        for op in self.steps:
            flood_fill(out, op.row, op.col, op.color)
        return out

    def colors(self) -> List[str]:
        return [op.color for op in self.steps]

    def signature(self) -> str:
        return "|".join(op.signature() for op in self.steps)

    def __len__(self) -> int:
        return len(self.steps)
