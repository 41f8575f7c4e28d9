import random
import unittest

from scripts.run_sample import random_board, run_sample


class TestRunSample(unittest.TestCase):
    def test_small_sample(self):
        summary = run_sample(sample_size=4, rows=2, cols=3, num_colors=3, seed=1, cross_check=True)
        self.assertEqual(summary["num_boards"], 4)
        self.assertTrue(summary["all_solved"])
        self.assertEqual(summary["mismatches"], 0)
        for entry in summary["details"]:
            self.assertEqual(entry["moves"], len(entry["colors"]))
            expected = "|".join(f"fill(0,0,{color})" for color in entry["colors"])
            self.assertEqual(entry["program"], expected)

    def test_seeded_boards_repeat(self):
        a = random_board(random.Random(4), 3, 3, 2)
        b = random_board(random.Random(4), 3, 3, 2)
        self.assertEqual(a, b)
        self.assertTrue(all(cell in "AB" for row in a for cell in row))


if __name__ == "__main__":
    unittest.main()
