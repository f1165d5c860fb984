"""
Candidate connections between grid-adjacent sectors.

Connections are undirected and stored canonically as ``(low, high)`` so
membership tests and deduplication never depend on argument order. The
insertion order of a ConnectionSet is preserved because carving consumes
random draws in that order.
"""

from typing import Iterable, Iterator, List, NamedTuple, Set, Tuple

import structlog

from .alea_prng import AleaPRNG
from .rooms import Room
from .sectors import SectorLattice

logger = structlog.get_logger()

DUMMY_SKIP_CHANCE = 0.5


class Connection(NamedTuple):
    """Canonical unordered pair of sector ids."""

    low: int
    high: int

    @classmethod
    def of(cls, a: int, b: int) -> "Connection":
        if a == b:
            raise ValueError(f"Sector {a} cannot connect to itself")
        return cls(min(a, b), max(a, b))


class ConnectionSet:
    """Insertion-ordered set of canonical connections."""

    def __init__(self, pairs: Iterable[Tuple[int, int]] = ()):
        self._ordered: List[Connection] = []
        self._members: Set[Connection] = set()
        for a, b in pairs:
            self.add(a, b)

    def add(self, a: int, b: int) -> bool:
        """Add the pair unless already present. Returns True when added."""
        connection = Connection.of(a, b)
        if connection in self._members:
            return False
        self._members.add(connection)
        self._ordered.append(connection)
        return True

    def has(self, a: int, b: int) -> bool:
        return a != b and Connection.of(a, b) in self._members

    def partners(self, sector_id: int) -> List[int]:
        """Sector ids connected to ``sector_id``."""
        found = []
        for low, high in self._ordered:
            if low == sector_id:
                found.append(high)
            elif high == sector_id:
                found.append(low)
        return found

    def __contains__(self, pair) -> bool:
        a, b = pair
        return self.has(a, b)

    def __iter__(self) -> Iterator[Connection]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def __repr__(self) -> str:
        return f"ConnectionSet({self._ordered!r})"


def connect_adjacent(
    rooms: List[Room],
    lattice: SectorLattice,
    prng: AleaPRNG,
    dummy_skip_chance: float = DUMMY_SKIP_CHANCE,
) -> ConnectionSet:
    """
    Materialize a random subset of adjacency edges for every room.

    Real rooms always pick between one and all of their adjacent sectors.
    Dummy rooms first roll ``dummy_skip_chance`` and, on success, add no
    edges of their own. The result is not guaranteed to be connected.

    Args:
        rooms: Rooms in sector id order
        lattice: Sector lattice geometry
        prng: Random source for the whole generation call
        dummy_skip_chance: Probability that a dummy room adds no edges

    Returns:
        ConnectionSet of canonical, deduplicated edges
    """
    connections = ConnectionSet()
    skipped = 0
    for room in rooms:
        adjacent = lattice.neighbors(room.id)
        if not adjacent:
            continue
        if room.dummy and prng.chance(dummy_skip_chance):
            skipped += 1
            continue
        picks = prng.randint(1, len(adjacent))
        for _ in range(picks):
            other = prng.swap_remove(adjacent)
            connections.add(room.id, other)

    logger.debug("Connected adjacent sectors", connections=len(connections), dummies_skipped=skipped)
    return connections
