"""Bomb arrangements and the clue grids they produce."""

import itertools
from typing import Dict, Iterator, List

from .config import Arrangement, Cell, Coord, GameConfig, Grid
from .utils import encode_cells, get_moore_neighborhoods


class ClueInvariantError(RuntimeError):
    """A neighborhood bomb count fell outside the range the color classes cover."""


# Neighborhood bomb count -> color class.
_COUNT_CLASSES: Dict[int, Cell] = {
    0: Cell.GREEN,
    1: Cell.BLUE,
    2: Cell.BLUE,
    3: Cell.RED,
    4: Cell.RED,
}


def classify_count(count: int) -> Cell:
    """
    Map the number of bombs in a Moore neighborhood to its color class.

    Args:
        count: Bombs in the cell's 3x3 neighborhood, the cell included.

    Returns:
        GREEN for 0, BLUE for 1-2, RED for 3-4.

    Raises:
        ClueInvariantError: For any other count.
    """
    cell = _COUNT_CLASSES.get(count)
    if cell is None:
        raise ClueInvariantError(f"Unexpected neighborhood bomb count: {count}")
    return cell


def enumerate_arrangements(config: GameConfig) -> Iterator[Arrangement]:
    """
    Yield every placement of config.bomb_count bombs on the board.

    Coordinates inside an arrangement are in row-major order and arrangements
    come out in lexicographic order of cell index, so nothing is emitted twice.
    """
    positions: List[Coord] = [
        (x, y) for y in range(config.height) for x in range(config.width)
    ]
    for combination in itertools.combinations(positions, config.bomb_count):
        yield combination


def derive_clues(config: GameConfig, arrangement: Arrangement) -> Grid:
    """
    Build the fully revealed grid for one bomb arrangement.

    Args:
        config: Board dimensions.
        arrangement: Bomb coordinates.

    Returns:
        Packed grid where bomb cells are HIDDEN and every other cell holds
        the color class of its neighborhood bomb count.

    Raises:
        ClueInvariantError: If some neighborhood count has no color class.
    """
    neighborhoods = get_moore_neighborhoods(config.width, config.height)
    counts: List[List[int]] = [
        [0 for _ in range(config.width)] for _ in range(config.height)
    ]

    # Each bomb bumps every cell whose neighborhood contains it.
    for bx, by in arrangement:
        for nx, ny in neighborhoods[(bx, by)]:
            counts[ny][nx] += 1

    cells: List[Cell] = [
        classify_count(counts[y][x])
        for y in range(config.height)
        for x in range(config.width)
    ]
    for bx, by in arrangement:
        cells[config.index(bx, by)] = Cell.HIDDEN

    return encode_cells(cells)
