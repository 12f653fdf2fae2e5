"""Optimal expected score by memoized backward induction over masked grids."""

import logging
from typing import Dict, Optional, Tuple

from .config import COLORS, Coord, GameConfig, Grid
from .indexer import MissingStateError, StateTable, build_state_table
from .utils import CELL_BITS, cell_shift, color_counts

logger = logging.getLogger(__name__)

_FIELD_MASK = (1 << CELL_BITS) - 1


class ValueSolver:
    """
    Expected-value solver over an indexed StateTable.

    From a masked grid, every HIDDEN cell is a candidate reveal. A reveal
    shows GREEN, BLUE or RED with probability proportional to the completion
    count of the resulting grid; the remaining probability mass is a bomb,
    which ends the game paying the terminal value of the current grid. The
    value of a grid is the best candidate's expected value.
    """

    def __init__(self, config: GameConfig, table: StateTable) -> None:
        """
        Bind a solver to a fully indexed state table.

        Args:
            config: Configuration the table was built with.
            table: Indexed table; its cached values are filled in place.
        """
        self.config = config
        self.table = table
        self._shifts: Tuple[int, ...] = tuple(
            cell_shift(i) for i in range(config.cell_count)
        )

        # Number of grids whose value was computed rather than read from the memo.
        self.expansions: int = 0

    def terminal_value(self, grid: Grid) -> float:
        """Score of the revealed cells, i.e. the payout if the next reveal is a bomb."""
        green, blue, red = color_counts(grid)
        config = self.config
        return float(
            green * config.green_reward
            + blue * config.blue_reward
            + red * config.red_reward
        )

    def _total_for(self, grid: Grid) -> int:
        total = self.table.completion_count(grid)
        if total <= 0:
            raise MissingStateError(f"Grid has no consistent arrangement: {grid:#x}")
        return total

    def _action_value(self, grid: Grid, shift: int, total: int, terminal: float) -> float:
        """Expected value of revealing the HIDDEN cell at bit offset shift."""
        expected = 0.0
        color_completions = 0
        for color in COLORS:
            child = grid | (color << shift)
            count = self.table.completion_count(child)
            if count:
                color_completions += count
                expected += (count / total) * self.solve(child)

        bomb_probability = (total - color_completions) / total
        return expected + bomb_probability * terminal

    def solve(self, grid: Grid) -> float:
        """
        Return the optimal expected score from grid onward.

        Args:
            grid: A masked grid present in the table.

        Returns:
            The memoized value when available, otherwise the freshly computed
            maximum over candidate reveals. A grid with no HIDDEN cell is worth
            its terminal value.

        Raises:
            MissingStateError: If grid is absent from the table.
        """
        cached = self.table.cached_value(grid)
        if cached is not None:
            return cached

        self.expansions += 1
        total = self._total_for(grid)
        terminal = self.terminal_value(grid)

        best: Optional[float] = None
        for shift in self._shifts:
            if (grid >> shift) & _FIELD_MASK:
                continue
            value = self._action_value(grid, shift, total, terminal)
            if best is None or value > best:
                best = value

        if best is None:
            best = terminal

        self.table.store_value(grid, best)
        return best

    def action_values(self, grid: Grid) -> Dict[Coord, float]:
        """
        Expected value of revealing each HIDDEN cell of grid.

        Args:
            grid: A masked grid present in the table.

        Returns:
            Mapping from cell coordinates to the value of revealing that cell
            next and playing optimally afterwards.
        """
        total = self._total_for(grid)
        terminal = self.terminal_value(grid)

        values: Dict[Coord, float] = {}
        for i, shift in enumerate(self._shifts):
            if (grid >> shift) & _FIELD_MASK:
                continue
            values[self.config.coord(i)] = self._action_value(grid, shift, total, terminal)
        return values

    def best_action(self, grid: Grid) -> Optional[Coord]:
        """Cell with the highest action value (first in row-major order on ties)."""
        best_cell: Optional[Coord] = None
        best_value = 0.0
        for cell, value in self.action_values(grid).items():
            if best_cell is None or value > best_value:
                best_cell, best_value = cell, value
        return best_cell

    def solve_root(self) -> float:
        """Solve the all-HIDDEN starting grid."""
        value = self.solve(self.config.empty_grid())
        logger.info("Expected value of the starting grid: %.6f", value)
        return value


def solve_game(config: GameConfig) -> Tuple[float, StateTable]:
    """
    Run both phases: index every arrangement, then solve the starting grid.

    Args:
        config: Game configuration.

    Returns:
        Tuple of (expected value of the starting grid, solved state table).
    """
    table = build_state_table(config)
    solver = ValueSolver(config, table)
    return solver.solve_root(), table
