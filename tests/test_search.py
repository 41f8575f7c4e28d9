import random
import unittest

from flood_solve.errors import EmptyGridError, SearchBudgetExceeded
from flood_solve.grid import Fill, grid_from_rows, grid_key, is_uniform
from flood_solve.search import MinMovesSolver, min_moves


def shortest_by_bfs(grid):
    """Breadth-first reference: explore boards level by level with every color present."""
    if is_uniform(grid):
        return 0
    palette = sorted({cell for row in grid for cell in row})
    frontier = [grid]
    seen = {grid_key(grid)}
    depth = 0
    while frontier:
        depth += 1
        nxt = []
        for board in frontier:
            for color in palette:
                if color == board[0][0]:
                    continue
                out = Fill(color).apply(board)
                if is_uniform(out):
                    return depth
                key = grid_key(out)
                if key not in seen:
                    seen.add(key)
                    nxt.append(out)
        frontier = nxt
    raise AssertionError("unreachable")


class TestMinMoves(unittest.TestCase):
    def test_single_cell(self):
        self.assertEqual(min_moves(grid_from_rows(["X"])), 0)

    def test_two_colors(self):
        self.assertEqual(min_moves(grid_from_rows(["AB"])), 1)

    def test_uniform_is_zero(self):
        self.assertEqual(min_moves(grid_from_rows(["CCC", "CCC"])), 0)

    def test_checker_corner(self):
        self.assertEqual(min_moves(grid_from_rows(["AB", "CA"])), 3)

    def test_cross(self):
        self.assertEqual(min_moves(grid_from_rows(["ABA", "BBB", "ABA"])), 2)

    def test_tie_prefers_first_sorted_color(self):
        solver = MinMovesSolver()
        program = solver.solve(grid_from_rows(["ABC", "CCC"]))
        self.assertEqual(len(program), 2)
        self.assertEqual(program.colors(), ["B", "C"])

    def test_program_solves_board(self):
        grid = grid_from_rows(["ABCA", "CBAB", "AACC"])
        original = [row[:] for row in grid]
        program = MinMovesSolver().solve(grid)
        self.assertTrue(is_uniform(program.apply(grid)))
        # solving never touches the caller's grid
        self.assertEqual(grid, original)

    def test_zero_iff_uniform(self):
        rnd = random.Random(11)
        for _ in range(15):
            grid = [[rnd.choice("AB") for _ in range(3)] for _ in range(2)]
            self.assertEqual(min_moves(grid) == 0, is_uniform(grid))

    def test_matches_breadth_first_reference(self):
        rnd = random.Random(5)
        for _ in range(10):
            grid = [[rnd.choice("ABC") for _ in range(3)] for _ in range(3)]
            self.assertEqual(min_moves(grid), shortest_by_bfs(grid))

    def test_memoized_search_agrees(self):
        rnd = random.Random(9)
        for _ in range(10):
            grid = [[rnd.choice("ABC") for _ in range(3)] for _ in range(3)]
            plain = MinMovesSolver().solve(grid)
            memo = MinMovesSolver(memoize=True).solve(grid)
            self.assertEqual(len(plain), len(memo))
            self.assertEqual(plain.colors(), memo.colors())

    def test_memo_records_cache_hits(self):
        solver = MinMovesSolver(memoize=True)
        solver.solve(grid_from_rows(["ABEF", "CEEF", "EEEF"]))
        self.assertGreater(solver.stats.cache_hits, 0)
        plain = MinMovesSolver()
        plain.solve(grid_from_rows(["ABEF", "CEEF", "EEEF"]))
        self.assertEqual(plain.stats.cache_hits, 0)
        self.assertGreater(plain.stats.nodes, solver.stats.nodes)

    def test_depth_budget(self):
        grid = grid_from_rows(["AB", "CA"])
        with self.assertRaises(SearchBudgetExceeded):
            MinMovesSolver(max_depth=2).solve(grid)
        self.assertEqual(MinMovesSolver(max_depth=3).min_moves(grid), 3)
        self.assertEqual(MinMovesSolver(max_depth=3, memoize=True).min_moves(grid), 3)
        self.assertEqual(MinMovesSolver(max_depth=0).min_moves(grid_from_rows(["AA"])), 0)

    def test_empty_grid_rejected(self):
        with self.assertRaises(EmptyGridError):
            min_moves([])


if __name__ == "__main__":
    unittest.main()
