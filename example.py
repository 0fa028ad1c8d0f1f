#!/usr/bin/env python3
"""
Example usage of the lifeterm package.
"""

from lifeterm import Cell, GameOfLife, Grid, PatternLibrary


def main():
    """Demonstrate programmatic usage of the lifeterm package."""
    grid = Grid(12, 12)
    game = GameOfLife(grid)

    glider = PatternLibrary().get_pattern("Glider")
    if glider:
        glider.apply_to_grid(grid, offset_x=1, offset_y=1)

    print("Initial state:")
    print(grid)
    print(f"Population: {game.population}")
    print()

    # The edges are hard, so the glider ends up stuck in the corner
    for _ in range(40):
        game.step()

    print(f"Generation {game.generation}:")
    print(grid)
    print(f"Population: {game.population}")
    print(f"Corner cell alive: {grid.get_cell(11, 11) is Cell.ALIVE}")
    print(f"Neighbors of (10, 10): {grid.alive_neighbor_count(10, 10)}")


if __name__ == "__main__":
    main()
