#!/usr/bin/env python3
"""
Example usage of the gameoflife package.
"""

from gameoflife import Engine, GameRules, PatternLibrary


def main():
    """Demonstrate programmatic usage of the gameoflife package."""
    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    engine = Engine(glider.to_board(), GameRules())

    print("Initial state:")
    print(engine.board, end="")
    print(f"Population: {engine.population}")
    print()

    # Run simulation for 8 generations
    for _ in range(8):
        engine.next()
        print(f"Generation {engine.generation}:")
        print(engine.board.to_string(), end="")
        print(f"Population: {engine.population}")
        print()

    stats = engine.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
