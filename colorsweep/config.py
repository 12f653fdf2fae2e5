"""Game configuration: board dimensions, bomb count and color rewards."""

from dataclasses import dataclass
from enum import IntEnum
from math import comb
from typing import Dict, Tuple


class Cell(IntEnum):
    """
    Visible state of one board cell.

    HIDDEN stands for both "not revealed yet" and "bomb"; the two are only
    told apart through completion counts.
    """

    HIDDEN = 0
    GREEN = 1
    BLUE = 2
    RED = 3


COLORS: Tuple[Cell, ...] = (Cell.GREEN, Cell.BLUE, Cell.RED)

Coord = Tuple[int, int]
# Packed grid: cell i lives in bits 2i..2i+1 as its Cell value.
Grid = int
Arrangement = Tuple[Coord, ...]


@dataclass(frozen=True)
class GameConfig:
    """Fixed parameters of one game variant."""

    width: int
    height: int
    bomb_count: int
    green_reward: int = 1
    blue_reward: int = 5
    red_reward: int = 20

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Width and height must be positive.")
        if self.bomb_count < 0:
            raise ValueError("bomb_count must be non-negative.")
        if self.bomb_count > self.width * self.height:
            raise ValueError("bomb_count cannot exceed the number of cells.")
        if min(self.green_reward, self.blue_reward, self.red_reward) < 0:
            raise ValueError("Rewards must be non-negative.")

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    @property
    def safe_cell_count(self) -> int:
        return self.cell_count - self.bomb_count

    @property
    def arrangement_count(self) -> int:
        """Number of distinct bomb placements, C(W*H, K)."""
        return comb(self.cell_count, self.bomb_count)

    @property
    def masks_per_arrangement(self) -> int:
        """Number of revealed subsets of the safe cells of one arrangement."""
        return 1 << self.safe_cell_count

    @property
    def rewards(self) -> Dict[Cell, int]:
        return {
            Cell.HIDDEN: 0,
            Cell.GREEN: self.green_reward,
            Cell.BLUE: self.blue_reward,
            Cell.RED: self.red_reward,
        }

    @property
    def max_terminal_value(self) -> int:
        """Score bound reached if every safe cell were revealed as the top color."""
        return max(self.green_reward, self.blue_reward, self.red_reward) * (
            self.safe_cell_count
        )

    def index(self, x: int, y: int) -> int:
        """Row-major position of (x, y) inside a flat grid."""
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            raise ValueError("Cell coordinates are outside the board.")
        return y * self.width + x

    def coord(self, i: int) -> Coord:
        return i % self.width, i // self.width

    def empty_grid(self) -> Grid:
        """The all-HIDDEN grid every game starts from."""
        return 0


REFERENCE_CONFIG = GameConfig(width=5, height=4, bomb_count=4)
