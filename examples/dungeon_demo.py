#!/usr/bin/env python3
"""
Demo script showing dungeon generation from a seed.
"""

import sys

from py_dungeon.core import MapConfig, generate_dungeon, generate_random_dungeon
from py_dungeon.core.analysis import map_statistics


def show(dungeon):
    """Print a dungeon with spawn (S) and exit (E) marked."""
    rows = [list(row) for row in dungeon.grid.to_ascii()]
    top = dungeon.grid.height - 1
    rows[top - dungeon.spawn.y][dungeon.spawn.x] = "S"
    rows[top - dungeon.exit.y][dungeon.exit.x] = "E"
    for row in rows:
        print("".join(row))

    config = dungeon.config
    print(f"\nSeed: {dungeon.seed}")
    print(f"Lattice: {config.columns}x{config.rows}, real rooms: {len(dungeon.real_ids)}")
    print(f"Connections: {len(dungeon.connections)}, repairs: {dungeon.repairs}, merges: {len(dungeon.merged)}")
    for name, value in map_statistics(dungeon.grid, dungeon.spawn, dungeon.rooms).items():
        print(f"  {name}: {value}")


def main():
    """Demonstrate random and fixed-configuration generation."""
    seed = sys.argv[1] if len(sys.argv) > 1 else "demo"

    print("=== Random configuration ===")
    show(generate_random_dungeon(seed=seed))

    print("\n=== Fixed 4x3 lattice, every sector real ===")
    show(generate_dungeon(MapConfig(rows=3, columns=4, rooms=12), seed=seed))


if __name__ == "__main__":
    main()
