import logging

import pytest

from colorsweep import (
    REFERENCE_CONFIG,
    Cell,
    GameConfig,
    MissingStateError,
    StateTable,
    build_state_table,
    decode_grid,
    derive_clues,
    enumerate_arrangements,
    index_arrangement,
    masked_grids,
)
from tests.conftest import grid_of


def test_state_table_increment_and_lookup():
    table = StateTable()
    grid = grid_of("G.")
    assert table.completion_count(grid) == 0
    assert grid not in table

    table.increment(grid)
    table.increment(grid, 2)
    assert table.completion_count(grid) == 3
    assert table.record(grid).cached_value is None
    assert len(table) == 1
    assert list(table) == [grid]


def test_state_table_missing_record():
    with pytest.raises(MissingStateError):
        StateTable().record(grid_of(".."))


def test_single_reference_arrangement_mask_count():
    table = StateTable()
    arrangement = ((0, 0), (1, 1), (2, 3), (4, 0))
    generated = index_arrangement(REFERENCE_CONFIG, arrangement, table)

    assert generated == 65536
    assert table.total_completions() == 65536
    assert len(table) <= 65536
    assert table.completion_count(REFERENCE_CONFIG.empty_grid()) == 1
    assert table.completion_count(derive_clues(REFERENCE_CONFIG, arrangement)) == 1


def test_masks_keep_colors_or_hide():
    config = GameConfig(width=3, height=2, bomb_count=2)
    arrangement = ((0, 0), (2, 1))
    clues = derive_clues(config, arrangement)
    masks = list(masked_grids(config, arrangement))

    assert len(masks) == config.masks_per_arrangement
    for mask in masks:
        for shown, full in zip(decode_grid(config, mask), decode_grid(config, clues)):
            assert shown in (Cell.HIDDEN, full)


def test_batched_counts_equal_single_increments(small_config):
    batched = StateTable()
    single = StateTable()
    for arrangement in enumerate_arrangements(small_config):
        index_arrangement(small_config, arrangement, batched)
        for grid in masked_grids(small_config, arrangement):
            single.increment(grid)

    assert len(batched) == len(single)
    for grid, record in single.items():
        assert batched.completion_count(grid) == record.completion_count


def test_full_table_invariants(small_config, small_table):
    assert small_table.completion_count(small_config.empty_grid()) == 36
    assert small_table.total_completions() == 36 * 2 ** 7
    for _, record in small_table.items():
        assert 1 <= record.completion_count <= 36


def test_fully_revealed_grids_are_unique_per_arrangement(small_config, small_table):
    for arrangement in enumerate_arrangements(small_config):
        full = derive_clues(small_config, arrangement)
        # A fully revealed grid pins down its bombs.
        assert small_table.completion_count(full) == 1


def test_pair_table_counts(pair_table):
    assert len(pair_table) == 3
    assert pair_table.completion_count(grid_of("..")) == 2
    assert pair_table.completion_count(grid_of("B.")) == 1
    assert pair_table.completion_count(grid_of(".B")) == 1
    assert pair_table.completion_count(grid_of("G.")) == 0


def test_build_logs_grid_count(caplog, pair_config):
    caplog.set_level(logging.INFO, logger="colorsweep")
    build_state_table(pair_config)
    assert "Indexed 3 distinct grids" in caplog.text


def test_masks_of_one_arrangement_are_distinct_ints(small_config):
    arrangement = ((0, 0), (2, 2))
    masks = masked_grids(small_config, arrangement)
    assert len(set(masks)) == len(masks) == small_config.masks_per_arrangement
    assert all(type(mask) is int for mask in masks)


def test_table_keys_are_packed_ints(small_table):
    assert all(type(grid) is int for grid in small_table)


def test_values_stored_beside_counts(pair_config, pair_table):
    root = pair_config.empty_grid()
    assert pair_table.cached_value(root) is None
    assert pair_table.solved_count() == 0

    pair_table.store_value(root, 2.5)
    assert pair_table.cached_value(root) == 2.5
    assert pair_table.record(root).cached_value == 2.5
    assert pair_table.record(root).completion_count == 2
    assert pair_table.solved_count() == 1

    with pytest.raises(MissingStateError):
        pair_table.cached_value(grid_of("GG"))
