"""
Central configuration for flood_solve.

Holds the command words, solver defaults and the exact output templates
printed by the command-line entrypoint.
"""

# Every minimum-moves fill is anchored here (row, col)
TOP_LEFT = (0, 0)

# Command words; any other leading token selects the minimum-moves computation
COMMANDS = {
    'fill': 'fill',
    'adjacent': 'adjacent',
}

# Solver defaults
SOLVER_CONFIG = {
    'max_depth': None,   # None = unbounded exhaustive search
    'memoize': False,    # cache sub-results by board state
}

# Output lines
OUTPUT_FORMATS = {
    'fill': 'Number of pixels filled: {count}',
    'min_moves': 'Minimum number of steps to fill image with one color: {steps}',
    'path': 'Fill sequence: {colors}',
    'error': 'error: {message}',
}

LOG_FORMAT = "%(levelname)s | %(name)s | %(message)s"
DEFAULT_LOG_LEVEL = 'WARNING'
