from __future__ import annotations

import argparse
import json
import random
from typing import Any, Dict, List

from flood_solve.grid import Grid, grid_key, is_uniform
from flood_solve.search import MinMovesSolver


COLOR_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def random_board(rnd: random.Random, rows: int, cols: int, num_colors: int) -> Grid:
    palette = COLOR_ALPHABET[: max(1, min(num_colors, len(COLOR_ALPHABET)))]
    return [[rnd.choice(palette) for _ in range(cols)] for _ in range(rows)]


def run_sample(
    sample_size: int = 10,
    rows: int = 3,
    cols: int = 3,
    num_colors: int = 3,
    seed: int = 0,
    memoize: bool = False,
    cross_check: bool = False,
) -> Dict[str, Any]:
    rnd = random.Random(seed)
    solver = MinMovesSolver(memoize=memoize)
    # Reference solver for cross-checking uses the opposite caching mode
    reference = MinMovesSolver(memoize=not memoize) if cross_check else None

    per_board: List[Dict[str, Any]] = []
    mismatches = 0
    for _ in range(max(1, sample_size)):
        board = random_board(rnd, rows, cols, num_colors)
        program = solver.solve(board)
        solved = is_uniform(program.apply(board))
        entry: Dict[str, Any] = {
            "board": list(grid_key(board)),
            "moves": len(program),
            "colors": "".join(program.colors()),
            "program": program.signature(),
            "solved": solved,
            "nodes": solver.stats.nodes,
        }
        if reference is not None:
            agrees = reference.min_moves(board) == len(program)
            entry["agrees"] = agrees
            if not agrees:
                mismatches += 1
        per_board.append(entry)

    moves = [d["moves"] for d in per_board]
    summary = {
        "num_boards": len(per_board),
        "mean_moves": sum(moves) / len(moves),
        "max_moves": max(moves),
        "all_solved": all(d["solved"] for d in per_board),
        "mismatches": mismatches,
        "details": per_board,
    }
    return summary


def main(argv: Any = None) -> int:
    parser = argparse.ArgumentParser(description="Solve a sample of random boards with the minimum-moves solver")
    parser.add_argument("--sample_size", type=int, default=10)
    parser.add_argument("--rows", type=int, default=3)
    parser.add_argument("--cols", type=int, default=3)
    parser.add_argument("--num_colors", type=int, default=3)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--memo", action="store_true")
    parser.add_argument("--cross_check", action="store_true")
    args = parser.parse_args(argv)

    summary = run_sample(
        sample_size=args.sample_size,
        rows=args.rows,
        cols=args.cols,
        num_colors=args.num_colors,
        seed=args.seed,
        memoize=args.memo,
        cross_check=args.cross_check,
    )
    print(json.dumps(summary, indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
