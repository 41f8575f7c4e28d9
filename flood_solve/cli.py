from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, List, Optional

from .config import COMMANDS, DEFAULT_LOG_LEVEL, LOG_FORMAT, OUTPUT_FORMATS, SOLVER_CONFIG
from .errors import FloodSolveError, MalformedInputError
from .grid import adjacent_colors, flood_fill
from .io import TokenReader, format_grid, parse_adjacent, parse_fill, parse_min_moves, read_tokens
from .search import MinMovesSolver


logger = logging.getLogger(__name__)


def run(
    tokens: List[str],
    max_depth: Optional[int] = SOLVER_CONFIG["max_depth"],
    memoize: bool = SOLVER_CONFIG["memoize"],
    show_path: bool = False,
) -> List[str]:
    """Execute one command from a token stream and return the output lines.

    The first token picks the command; `fill` and `adjacent` are recognised,
    anything else runs the minimum-moves search on the remaining tokens.
    """
    if not tokens:
        raise MalformedInputError("empty input: expected a command")
    reader = TokenReader(tokens)
    command = reader.next_token("command")

    if command == COMMANDS["fill"]:
        req = parse_fill(reader)
        count = flood_fill(req.grid, req.row, req.col, req.color)
        return format_grid(req.grid).split("\n") + [OUTPUT_FORMATS["fill"].format(count=count)]

    if command == COMMANDS["adjacent"]:
        req = parse_adjacent(reader)
        return ["".join(adjacent_colors(req.grid, req.row, req.col))]

    logger.info("running minimum-moves search (command token %r)", command)
    req = parse_min_moves(reader)
    solver = MinMovesSolver(max_depth=max_depth, memoize=memoize)
    program = solver.solve(req.grid)
    lines = [OUTPUT_FORMATS["min_moves"].format(steps=len(program))]
    if show_path:
        lines.append(OUTPUT_FORMATS["path"].format(colors="".join(program.colors())))
    logger.info("explored %d boards", solver.stats.nodes)
    return lines


def main(argv: Any = None) -> int:
    parser = argparse.ArgumentParser(description="Flood-fill a grid, list adjacent colors, or count minimum fills")
    parser.add_argument("--input", default=None, help="Read tokens from this file instead of stdin")
    parser.add_argument("--max_depth", type=int, default=SOLVER_CONFIG["max_depth"], help="Give up on fill sequences longer than this")
    parser.add_argument("--memo", action="store_true", default=SOLVER_CONFIG["memoize"], help="Cache search results by board state")
    parser.add_argument("--show_path", action="store_true", help="Also print an optimal fill color sequence")
    parser.add_argument("--log_level", default=DEFAULT_LOG_LEVEL, choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT, stream=sys.stderr)

    try:
        if args.input is not None:
            with open(args.input, "r") as f:
                tokens = read_tokens(f)
        else:
            tokens = read_tokens(sys.stdin)
        lines = run(tokens, max_depth=args.max_depth, memoize=args.memo, show_path=args.show_path)
    except FloodSolveError as e:
        logger.debug("command failed", exc_info=True)
        print(OUTPUT_FORMATS["error"].format(message=e), file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
