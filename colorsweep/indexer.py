"""Partial-state indexing: completion counts for every reachable masked grid."""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .config import Arrangement, GameConfig, Grid
from .engine import derive_clues, enumerate_arrangements
from .utils import cell_shift

logger = logging.getLogger(__name__)

# Arrangements between two DEBUG progress lines.
_PROGRESS_EVERY = 500


class MissingStateError(KeyError):
    """The solver reached a grid that indexing never produced."""


@dataclass(frozen=True)
class StateRecord:
    """Snapshot of one grid's statistics; cached_value is None until solved."""

    completion_count: int
    cached_value: Optional[float] = None


class StateTable:
    """
    Completion counts and solved values keyed by packed grid.

    Counts are only accumulated while indexing. Values are filled in
    afterwards by the solver, once per grid.
    """

    def __init__(self) -> None:
        self._counts: Dict[Grid, int] = {}
        self._values: Dict[Grid, float] = {}

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, grid: object) -> bool:
        return grid in self._counts

    def __iter__(self) -> Iterator[Grid]:
        return iter(self._counts)

    def items(self) -> Iterator[Tuple[Grid, StateRecord]]:
        values = self._values
        for grid, count in self._counts.items():
            yield grid, StateRecord(count, values.get(grid))

    def increment(self, grid: Grid, amount: int = 1) -> None:
        """Add amount to the completion count of grid, creating it if needed."""
        self._counts[grid] = self._counts.get(grid, 0) + amount

    def increment_all(self, grids: Iterable[Grid]) -> None:
        """Add one completion to each grid of a batch."""
        counts = self._counts
        for grid in grids:
            counts[grid] = counts.get(grid, 0) + 1

    def completion_count(self, grid: Grid) -> int:
        """Completion count of grid, 0 when the grid was never observed."""
        return self._counts.get(grid, 0)

    def record(self, grid: Grid) -> StateRecord:
        """
        Return a snapshot of the statistics of a grid produced by indexing.

        Raises:
            MissingStateError: If the grid is not in the table.
        """
        count = self._counts.get(grid)
        if count is None:
            raise MissingStateError(f"No indexed state for grid {grid:#x}")
        return StateRecord(count, self._values.get(grid))

    def cached_value(self, grid: Grid) -> Optional[float]:
        """
        Solved value of grid, or None if it has not been solved yet.

        Raises:
            MissingStateError: If the grid is not in the table.
        """
        if grid not in self._counts:
            raise MissingStateError(f"No indexed state for grid {grid:#x}")
        return self._values.get(grid)

    def store_value(self, grid: Grid, value: float) -> None:
        self._values[grid] = value

    def solved_count(self) -> int:
        return len(self._values)

    def total_completions(self) -> int:
        return sum(self._counts.values())


def masked_grids(config: GameConfig, arrangement: Arrangement) -> List[Grid]:
    """
    Return every masked grid of one arrangement.

    Each safe cell is either HIDDEN or shows its clue color; bomb cells are
    always HIDDEN. Exactly 2 ** safe_cell_count grids are produced, one per
    subset of revealed safe cells.
    """
    clues = derive_clues(config, arrangement)
    masks: List[Grid] = [0]
    for i in range(config.cell_count):
        field = clues & (0b11 << cell_shift(i))
        if field:
            masks += [mask | field for mask in masks]
    return masks


def index_arrangement(
    config: GameConfig, arrangement: Arrangement, table: StateTable
) -> int:
    """
    Count every masked grid of one arrangement into the table.

    Args:
        config: Board dimensions.
        arrangement: Bomb coordinates.
        table: Table receiving one completion per masked grid.

    Returns:
        Number of masks generated, always config.masks_per_arrangement.
    """
    masks = masked_grids(config, arrangement)
    table.increment_all(masks)
    return len(masks)


def build_state_table(config: GameConfig) -> StateTable:
    """Index every bomb arrangement of the configuration into a fresh table."""
    table = StateTable()
    arrangements_done = 0
    for arrangement in enumerate_arrangements(config):
        index_arrangement(config, arrangement, table)
        arrangements_done += 1
        if arrangements_done % _PROGRESS_EVERY == 0:
            logger.debug(
                "Indexed %d/%d arrangements (%d grids so far)",
                arrangements_done,
                config.arrangement_count,
                len(table),
            )

    logger.info("Indexed %d distinct grids", len(table))
    return table
