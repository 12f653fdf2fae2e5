"""Reporting helpers for indexed and solved state tables."""

from typing import Dict, List

import matplotlib.pyplot as plt
import numpy as np

from .config import Cell, GameConfig, Grid
from .indexer import StateTable
from .utils import decode_grid, revealed_count

_CELL_CHARS: Dict[Cell, str] = {
    Cell.HIDDEN: ".",
    Cell.GREEN: "G",
    Cell.BLUE: "B",
    Cell.RED: "R",
}


def format_grid(config: GameConfig, grid: Grid, *, show_coords: bool = True) -> str:
    """
    Format a grid as a human-readable string.

    Args:
        config: Board dimensions.
        grid: Packed grid to display.
        show_coords: If True, include coordinate labels and a header.

    Returns:
        A text grid where HIDDEN cells are shown as '.', and colors as
        'G', 'B' or 'R'.

    Raises:
        ValueError: If the grid does not fit the board.
    """
    w, h = config.width, config.height
    cells = decode_grid(config, grid)

    lines: List[str] = []
    if show_coords:
        header = " ".join(f"{x:2d}" for x in range(w))
        lines.append("   " + header)
        lines.append("   " + "-" * (3 * w - 1))

    for y in range(h):
        row = " ".join(f" {_CELL_CHARS[cells[y * w + x]]}" for x in range(w))
        lines.append(f"{y:2d} |" + row if show_coords else row)

    return "\n".join(lines)


def _revealed_counts(table: StateTable) -> np.ndarray:
    return np.fromiter(
        (revealed_count(grid) for grid in table),
        dtype=np.int64,
        count=len(table),
    )


def summarize_state_table(config: GameConfig, table: StateTable) -> Dict[str, object]:
    """
    Compute summary statistics of a state table.

    Args:
        config: Configuration the table was built with.
        table: Indexed (and optionally solved) table.

    Returns:
        Dict with keys:
        - distinct_grids: number of masked grids in the table
        - total_completions: sum of all completion counts
        - root_completions: completion count of the all-HIDDEN grid
        - mean_completion_count, max_completion_count
        - grids_by_revealed: list where entry n counts grids with n revealed cells
        - solved_grids: number of grids with a cached value
        - mean_solved_value: mean cached value over solved grids (0.0 if none)
    """
    completions = np.fromiter(
        (record.completion_count for _, record in table.items()),
        dtype=np.int64,
        count=len(table),
    )
    revealed = _revealed_counts(table)
    solved = np.array(
        [r.cached_value for _, r in table.items() if r.cached_value is not None],
        dtype=np.float64,
    )

    by_revealed = np.bincount(revealed, minlength=config.safe_cell_count + 1)

    return {
        "distinct_grids": len(table),
        "total_completions": int(completions.sum()),
        "root_completions": table.completion_count(config.empty_grid()),
        "mean_completion_count": float(completions.mean()) if len(table) else 0.0,
        "max_completion_count": int(completions.max()) if len(table) else 0,
        "grids_by_revealed": [int(n) for n in by_revealed],
        "solved_grids": int(solved.size),
        "mean_solved_value": float(solved.mean()) if solved.size else 0.0,
    }


def plot_values_by_revealed(config: GameConfig, table: StateTable) -> Dict[int, float]:
    """
    Plot the mean solved value against the number of revealed cells.

    Args:
        config: Configuration the table was built with.
        table: Table with at least one solved grid.

    Returns:
        Mapping from revealed-cell count to mean solved value for that count.

    Raises:
        ValueError: If no grid of the table has been solved.
    """
    revealed_list: List[int] = []
    values_list: List[float] = []
    for grid, record in table.items():
        if record.cached_value is None:
            continue
        revealed_list.append(revealed_count(grid))
        values_list.append(record.cached_value)

    if not values_list:
        raise ValueError("The table holds no solved grid; run the solver first.")

    revealed = np.array(revealed_list, dtype=np.int64)
    values = np.array(values_list, dtype=np.float64)

    sums = np.bincount(revealed, weights=values, minlength=config.safe_cell_count + 1)
    counts = np.bincount(revealed, minlength=config.safe_cell_count + 1)
    present = np.nonzero(counts)[0]
    means: Dict[int, float] = {int(n): float(sums[n] / counts[n]) for n in present}

    x = np.array(sorted(means))
    plt.figure()  # type: ignore[misc]
    plt.bar(x, [means[int(n)] for n in x])  # type: ignore[misc]
    plt.xlabel("Revealed cells")  # type: ignore[misc]
    plt.ylabel("Mean expected score")  # type: ignore[misc]
    plt.title(  # type: ignore[misc]
        f"Optimal value by information revealed "
        f"({config.width}x{config.height}, {config.bomb_count} bombs)"
    )
    plt.tight_layout()
    plt.show()  # type: ignore[misc]

    return means
