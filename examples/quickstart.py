"""
Quickstart example for the Colorsweep solver.

This script demonstrates basic usage on boards small enough to solve in seconds.
"""

import logging

from colorsweep import (
    GameConfig,
    StateTable,
    ValueSolver,
    build_state_table,
    derive_clues,
    format_grid,
    summarize_state_table,
)


def main():
    logging.basicConfig(level=logging.INFO)

    print("=" * 60)
    print("Colorsweep Solver - Quickstart Example")
    print("=" * 60)

    config = GameConfig(width=4, height=3, bomb_count=2)

    # Example 1: Clue grid of one arrangement
    print("\n1. Clue grid for bombs at (0, 0) and (2, 1)...")
    print("-" * 60)
    print(format_grid(config, derive_clues(config, ((0, 0), (2, 1)))))

    # Example 2: Index every arrangement
    print(f"\n2. Indexing {config.arrangement_count} arrangements...")
    print("-" * 60)
    table: StateTable = build_state_table(config)
    summary = summarize_state_table(config, table)
    print(f"Distinct grids: {summary['distinct_grids']}")
    print(f"Starting grid completions: {summary['root_completions']}")

    # Example 3: Solve and pick the opening move
    print("\n3. Solving the starting grid...")
    print("-" * 60)
    solver = ValueSolver(config, table)
    value = solver.solve_root()
    print(f"Optimal expected score: {value:.4f}")
    print(f"Best opening reveal: {solver.best_action(config.empty_grid())}")
    print(f"Grids expanded: {solver.expansions}")

    # Example 4: Compare bomb counts on the same board
    print("\n4. Expected score by bomb count on a 3x3 board...")
    print("-" * 60)
    for bombs in range(1, 4):
        small = GameConfig(width=3, height=3, bomb_count=bombs)
        small_solver = ValueSolver(small, build_state_table(small))
        print(f"{bombs} bombs: {small_solver.solve_root():8.4f}")

    print("\n" + "=" * 60)
    print("Done! Run `python -m colorsweep` for the 5x4 reference board.")
    print("=" * 60)


if __name__ == "__main__":
    main()
