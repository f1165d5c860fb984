"""HTTP API for dungeon generation."""
