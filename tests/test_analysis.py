import matplotlib.pyplot as plt
import pytest

from colorsweep import (
    GameConfig,
    ValueSolver,
    derive_clues,
    format_grid,
    plot_values_by_revealed,
    summarize_state_table,
)
from tests.conftest import grid_of


def test_format_grid_plain(pair_config):
    assert format_grid(pair_config, grid_of("B."), show_coords=False) == " B  ."


def test_format_grid_with_coords():
    config = GameConfig(width=5, height=4, bomb_count=1)
    text = format_grid(config, derive_clues(config, ((0, 0),)))
    lines = text.splitlines()
    assert len(lines) == 2 + 4
    assert lines[2] == " 0 | .  B  G  G  G"
    assert lines[3] == " 1 | B  B  G  G  G"


def test_format_grid_rejects_bits_past_board(pair_config):
    with pytest.raises(ValueError):
        format_grid(pair_config, grid_of("..R"))


def test_summarize_indexed_table(pair_config, pair_table):
    summary = summarize_state_table(pair_config, pair_table)
    assert summary["distinct_grids"] == 3
    assert summary["total_completions"] == 4
    assert summary["root_completions"] == 2
    assert summary["max_completion_count"] == 2
    assert summary["mean_completion_count"] == pytest.approx(4 / 3)
    assert summary["grids_by_revealed"] == [1, 2]
    assert summary["solved_grids"] == 0
    assert summary["mean_solved_value"] == 0.0


def test_summarize_solved_table(pair_config, pair_table):
    ValueSolver(pair_config, pair_table).solve_root()
    summary = summarize_state_table(pair_config, pair_table)
    assert summary["solved_grids"] == 3
    assert summary["mean_solved_value"] == pytest.approx((2.5 + 5.0 + 5.0) / 3)


def test_plot_requires_solved_table(pair_config, pair_table):
    with pytest.raises(ValueError):
        plot_values_by_revealed(pair_config, pair_table)


def test_plot_values_by_revealed(monkeypatch, pair_config, pair_table):
    monkeypatch.setattr(plt, "show", lambda: None)
    ValueSolver(pair_config, pair_table).solve_root()

    means = plot_values_by_revealed(pair_config, pair_table)
    assert means == {0: pytest.approx(2.5), 1: pytest.approx(5.0)}
    plt.close("all")
