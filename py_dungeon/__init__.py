"""
Sector-based procedural dungeon generator.
"""

from .core import MapConfig, MapRanges, DungeonMap, generate, generate_dungeon, generate_random_dungeon

__version__ = "0.1.0"

__all__ = ['MapConfig', 'MapRanges', 'DungeonMap', 'generate', 'generate_dungeon',
           'generate_random_dungeon']
