"""Board geometry and packed-grid helpers."""

import functools
from typing import Dict, Iterable, Tuple

from .config import Cell, GameConfig, Grid

# Two bits per cell; HIDDEN is 0 so the starting grid is the integer 0.
CELL_BITS = 2
_CELL_MASK = (1 << CELL_BITS) - 1
# Low bit of every cell field, wide enough for any board that fits in memory.
_LOW_BITS = int("01" * 64, 2)


@functools.lru_cache(maxsize=None)
def get_moore_neighborhoods(
    width: int, height: int
) -> Dict[Tuple[int, int], Tuple[Tuple[int, int], ...]]:
    """
    Map every cell (x, y) to the in-board cells of its 3x3 block, itself included.

    Raises:
        ValueError: If width or height is non-positive.
    """
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive.")

    return {
        (x, y): tuple(
            (nx, ny)
            for ny in range(max(0, y - 1), min(height, y + 2))
            for nx in range(max(0, x - 1), min(width, x + 2))
        )
        for y in range(height)
        for x in range(width)
    }


def cell_shift(i: int) -> int:
    """Bit offset of the field holding cell i."""
    return i * CELL_BITS


def cell_at(grid: Grid, i: int) -> Cell:
    return Cell((grid >> cell_shift(i)) & _CELL_MASK)


def encode_cells(cells: Iterable[Cell]) -> Grid:
    """Pack a row-major sequence of cells into a grid integer."""
    grid = 0
    for i, cell in enumerate(cells):
        grid |= int(cell) << cell_shift(i)
    return grid


def decode_grid(config: GameConfig, grid: Grid) -> Tuple[Cell, ...]:
    """
    Unpack a grid integer into its row-major cells.

    Raises:
        ValueError: If grid has bits beyond the board's last cell.
    """
    if grid < 0 or grid >> cell_shift(config.cell_count):
        raise ValueError(
            f"Grid {grid:#x} does not fit a board of {config.cell_count} cells."
        )
    return tuple(cell_at(grid, i) for i in range(config.cell_count))


def color_counts(grid: Grid) -> Tuple[int, int, int]:
    """Number of (GREEN, BLUE, RED) cells revealed in grid."""
    low = grid & _LOW_BITS
    high = (grid >> 1) & _LOW_BITS
    green = bin(low & ~high).count("1")
    blue = bin(high & ~low).count("1")
    red = bin(low & high).count("1")
    return green, blue, red


def revealed_count(grid: Grid) -> int:
    return bin((grid | (grid >> 1)) & _LOW_BITS).count("1")
