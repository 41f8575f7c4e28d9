from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .config import SOLVER_CONFIG, TOP_LEFT
from .errors import SearchBudgetExceeded
from .grid import Grid, Program, adjacent_colors, copy_grid, flood_fill, grid_key, validate_grid


logger = logging.getLogger(__name__)

# Best color sequence from a board to a single color, None when the depth budget cut every branch
Path = Optional[Tuple[str, ...]]


@dataclass
class SearchStats:
    nodes: int = 0
    cache_hits: int = 0
    max_level: int = 0


@dataclass
class _Frame:
    grid: Grid
    candidates: List[str]
    level: int
    via: Optional[str] = None  # color filled to reach this board from its parent
    next_idx: int = 0
    best: Path = None

    def offer(self, color: str, sub: Path) -> None:
        if sub is None:
            return
        path = (color,) + sub
        # strict comparison keeps the first candidate in sorted order on ties
        if self.best is None or len(path) < len(self.best):
            self.best = path


def _candidates(grid: Grid) -> List[str]:
    row, col = TOP_LEFT
    return adjacent_colors(grid, row, col, grid[row][col])


class MinMovesSolver:
    """Exhaustive search for the fewest top-left fills that leave one color.

    Every candidate color bordering the top-left region is tried on its own
    copy of the board, and the cheapest continuation wins. The walk uses an
    explicit stack of frames so deep searches never hit the recursion limit.
    """

    def __init__(self, max_depth: Optional[int] = SOLVER_CONFIG["max_depth"], memoize: bool = SOLVER_CONFIG["memoize"]):
        self.max_depth = max_depth
        self.memoize = memoize
        self.stats = SearchStats()
        self._cache: Dict[Tuple[str, ...], Path] = {}

    def _lookup(self, grid: Grid, remaining: Optional[int]) -> Tuple[bool, Path]:
        if not self.memoize:
            return False, None
        key = grid_key(grid)
        if key not in self._cache:
            return False, None
        path = self._cache[key]
        self.stats.cache_hits += 1
        if remaining is not None and len(path) > remaining:
            return True, None
        return True, path

    def _store(self, grid: Grid, path: Path) -> None:
        if self.memoize and path is not None:
            self._cache[grid_key(grid)] = path

    def solve(self, grid: Grid) -> Program:
        validate_grid(grid)
        self.stats = SearchStats()
        self._cache = {}

        root = _Frame(grid=copy_grid(grid), candidates=_candidates(grid), level=0)
        self.stats.nodes = 1
        if not root.candidates:
            return Program([])

        stack: List[_Frame] = [root]
        result: Path = None
        while stack:
            top = stack[-1]
            if top.next_idx >= len(top.candidates):
                stack.pop()
                self._store(top.grid, top.best)
                if stack:
                    stack[-1].offer(top.via, top.best)
                else:
                    result = top.best
                continue

            color = top.candidates[top.next_idx]
            top.next_idx += 1
            level = top.level + 1
            if self.max_depth is not None and level > self.max_depth:
                continue

            child = copy_grid(top.grid)
            row, col = TOP_LEFT
            flood_fill(child, row, col, color)
            self.stats.nodes += 1
            self.stats.max_level = max(self.stats.max_level, level)

            remaining = None if self.max_depth is None else self.max_depth - level
            hit, cached = self._lookup(child, remaining)
            if hit:
                top.offer(color, cached)
                continue

            candidates = _candidates(child)
            if not candidates:
                top.offer(color, ())
                continue
            if remaining == 0:
                continue
            stack.append(_Frame(grid=child, candidates=candidates, level=level, via=color))

        logger.debug(
            "search done: %d nodes, %d cache hits, deepest level %d",
            self.stats.nodes,
            self.stats.cache_hits,
            self.stats.max_level,
        )
        if result is None:
            raise SearchBudgetExceeded(self.max_depth)
        return Program.from_colors(result)

    def min_moves(self, grid: Grid) -> int:
        return len(self.solve(grid))


def min_moves(grid: Grid, max_depth: Optional[int] = None, memoize: bool = False) -> int:
    return MinMovesSolver(max_depth=max_depth, memoize=memoize).min_moves(grid)
