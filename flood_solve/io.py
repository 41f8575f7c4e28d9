from __future__ import annotations

from dataclasses import dataclass
from typing import IO, List

from .errors import EmptyGridError, MalformedInputError
from .grid import Grid


def read_tokens(stream: IO[str]) -> List[str]:
    """Split the whole input stream into whitespace-separated tokens."""
    return stream.read().split()


class TokenReader:
    def __init__(self, tokens: List[str]):
        self.tokens = tokens
        self.pos = 0

    def next_token(self, name: str) -> str:
        if self.pos >= len(self.tokens):
            raise MalformedInputError(f"unexpected end of input while reading {name}")
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def next_int(self, name: str) -> int:
        tok = self.next_token(name)
        try:
            return int(tok)
        except ValueError:
            raise MalformedInputError(f"expected an integer for {name}, got {tok!r}") from None

    def next_symbol(self, name: str) -> str:
        tok = self.next_token(name)
        if len(tok) != 1:
            raise MalformedInputError(f"expected a single color symbol for {name}, got {tok!r}")
        return tok

    def expect_end(self) -> None:
        if self.pos < len(self.tokens):
            extra = len(self.tokens) - self.pos
            raise MalformedInputError(f"{extra} unexpected trailing token(s) starting with {self.tokens[self.pos]!r}")


def read_grid(reader: TokenReader) -> Grid:
    """Read `rows cols` followed by rows*cols symbols in row-major order.

    Cells are taken one character at a time, so `A B`, `AB` and `A\\nB` all
    give the same cells. A token must not run past the last cell.
    """
    rows = reader.next_int("rows")
    cols = reader.next_int("cols")
    if rows <= 0 or cols <= 0:
        raise EmptyGridError(rows, cols)
    needed = rows * cols
    cells: List[str] = []
    while len(cells) < needed:
        r, c = divmod(len(cells), cols)
        tok = reader.next_token(f"cell ({r}, {c})")
        if len(cells) + len(tok) > needed:
            raise MalformedInputError(f"token {tok!r} runs past the last cell of a {rows}x{cols} grid")
        cells.extend(tok)
    return [cells[r * cols : (r + 1) * cols] for r in range(rows)]


@dataclass
class FillRequest:
    row: int
    col: int
    color: str
    grid: Grid


@dataclass
class AdjacentRequest:
    row: int
    col: int
    grid: Grid


@dataclass
class MinMovesRequest:
    grid: Grid


def parse_fill(reader: TokenReader) -> FillRequest:
    row = reader.next_int("start_row")
    col = reader.next_int("start_col")
    color = reader.next_symbol("replacement_color")
    grid = read_grid(reader)
    reader.expect_end()
    return FillRequest(row, col, color, grid)


def parse_adjacent(reader: TokenReader) -> AdjacentRequest:
    row = reader.next_int("start_row")
    col = reader.next_int("start_col")
    grid = read_grid(reader)
    reader.expect_end()
    return AdjacentRequest(row, col, grid)


def parse_min_moves(reader: TokenReader) -> MinMovesRequest:
    grid = read_grid(reader)
    reader.expect_end()
    return MinMovesRequest(grid)


def format_grid(grid: Grid) -> str:
    return "\n".join("".join(row) for row in grid)
