"""
Random number generation utilities.

Every dungeon is generated from a single AleaPRNG owned by that generation
call. Python's random and NumPy's random are not used, so a seed string is
all that is needed to reproduce a map.
"""

import uuid
from typing import Optional, Union

from ..core.alea_prng import AleaPRNG

Seed = Union[str, int]


def new_seed() -> str:
    """Create a short random seed string for maps requested without one."""
    return str(uuid.uuid4())[:8]


def make_prng(seed: Optional[Seed] = None) -> AleaPRNG:
    """
    Create a fresh PRNG for one generation call.

    Args:
        seed: Seed string or number; a new seed is drawn when omitted

    Returns:
        AleaPRNG instance
    """
    if seed is None:
        seed = new_seed()
    return AleaPRNG(seed)
