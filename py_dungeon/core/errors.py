"""Exceptions raised by dungeon generation."""


class DungeonError(Exception):
    """Base class for dungeon generation failures."""


class ConfigError(DungeonError, ValueError):
    """The lattice or room configuration cannot host a valid dungeon."""


class GenerationError(DungeonError, RuntimeError):
    """Connectivity repair ran out of candidate edges before every real room was reached."""
