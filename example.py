#!/usr/bin/env python3
"""
Example usage of the termlife package.
"""

from termlife import GameOfLife, Grid, PatternBuilder


def main():
    """Demonstrate programmatic usage of the termlife package."""
    grid = Grid(20, 12)
    glider = PatternBuilder().select_type("glider").rotate("right").build()
    grid.stamp(glider, 2, 8)

    game = GameOfLife(grid)

    print("Initial state:")
    print(game.grid.render("#", "."))
    print()

    for _ in range(8):
        game.step()
        print(f"Generation {game.generation}:")
        print(game.grid.render("#", "."))
        print(f"Population: {game.population}")
        print()

    stats = game.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
