"""
Colorsweep expected-value solver

Exhaustive analysis of a small bomb-deduction game where revealed cells show
a color class of their neighborhood bomb count:
- Arrangement enumeration: every placement of the bombs
- Clue derivation: the fully revealed color grid of a placement
- Partial-state indexing: completion counts for every masked grid
- Value solving: optimal expected score by memoized backward induction
"""

from .config import COLORS, REFERENCE_CONFIG, Cell, GameConfig
from .engine import (
    ClueInvariantError,
    classify_count,
    derive_clues,
    enumerate_arrangements,
)
from .indexer import (
    MissingStateError,
    StateRecord,
    StateTable,
    build_state_table,
    index_arrangement,
    masked_grids,
)
from .solver import ValueSolver, solve_game
from .utils import decode_grid, encode_cells
from .analysis import format_grid, plot_values_by_revealed, summarize_state_table

__version__ = "1.0.0"

__all__ = [
    # Configuration
    "Cell",
    "COLORS",
    "GameConfig",
    "REFERENCE_CONFIG",
    # Pipeline
    "enumerate_arrangements",
    "classify_count",
    "derive_clues",
    "masked_grids",
    "index_arrangement",
    "build_state_table",
    "StateRecord",
    "StateTable",
    "ValueSolver",
    "solve_game",
    # Packed grids
    "encode_cells",
    "decode_grid",
    # Errors
    "ClueInvariantError",
    "MissingStateError",
    # Analysis functions
    "format_grid",
    "summarize_state_table",
    "plot_values_by_revealed",
]
