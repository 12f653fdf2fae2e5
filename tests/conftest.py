import matplotlib

matplotlib.use("Agg")

import pytest

from colorsweep import Cell, GameConfig, StateTable, build_state_table, encode_cells


@pytest.fixture
def pair_config() -> GameConfig:
    """2x1 board with one bomb: small enough to solve by hand."""
    return GameConfig(width=2, height=1, bomb_count=1)


@pytest.fixture
def pair_table(pair_config: GameConfig) -> StateTable:
    return build_state_table(pair_config)


@pytest.fixture(scope="session")
def small_config() -> GameConfig:
    return GameConfig(width=3, height=3, bomb_count=2)


@pytest.fixture(scope="session")
def small_table(small_config: GameConfig) -> StateTable:
    return build_state_table(small_config)


def grid_of(text: str):
    """Build a grid from a compact string such as 'GB.R' ('.' is HIDDEN)."""
    chars = {".": Cell.HIDDEN, "G": Cell.GREEN, "B": Cell.BLUE, "R": Cell.RED}
    return encode_cells(chars[c] for c in text)
