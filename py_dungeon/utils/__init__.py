"""Shared utilities."""

from .random import make_prng, new_seed

__all__ = ["make_prng", "new_seed"]
