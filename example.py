#!/usr/bin/env python3
"""
Example usage of the torolife package.
"""

from torolife import GameOfLife, PatternLibrary, create, render, step
from torolife.core.seeding import blank_seed


def main():
    """Demonstrate programmatic usage of the torolife package."""
    # The three engine operations on the default 64x64 grid
    grid = create()
    step(grid)
    print(f"Default grid after one generation: {grid.population} live cells")
    print()

    # A glider crossing the edges of a small torus
    grid = create(8, 8, blank_seed)
    game = GameOfLife(grid)

    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    if glider:
        glider.apply_to_grid(grid, offset_x=5, offset_y=5)

        print("Initial state:")
        print(render(grid, "#", "."))

        for _ in range(8):
            game.step()
            print(f"Generation {game.generation}:")
            print(render(grid, "#", "."))

    stats = game.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
