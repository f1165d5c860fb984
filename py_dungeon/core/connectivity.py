"""
Cluster computation and connectivity repair.

The cluster is the set of sectors reachable from the spawn sector through
the current connections. Repair grows it one frontier edge at a time until
every real sector belongs to it. Each repair edge joins a sector that was
outside the cluster, so the cluster strictly grows every round and at most
``rows * columns - 1`` rounds are ever needed.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set, Tuple

import structlog

from .alea_prng import AleaPRNG
from .connections import Connection, ConnectionSet
from .errors import GenerationError
from .sectors import SectorLattice

logger = structlog.get_logger()


@dataclass
class RepairResult:
    """Outcome of connectivity repair."""

    cluster: Set[int]
    added: List[Connection] = field(default_factory=list)

    @property
    def rounds(self) -> int:
        return len(self.added)


def get_cluster(connections: Iterable[Tuple[int, int]], start: int) -> Set[int]:
    """
    Sectors transitively reachable from ``start``.

    Scans every connection repeatedly, adding an endpoint whenever its
    partner is already clustered, until a full pass adds nothing.
    """
    pairs = list(connections)
    cluster = {start}
    size = 0
    while len(cluster) != size:
        size = len(cluster)
        for a, b in pairs:
            has_a = a in cluster
            has_b = b in cluster
            if has_a and not has_b:
                cluster.add(b)
            elif has_b and not has_a:
                cluster.add(a)
    return cluster


def covers(cluster: Set[int], real_ids: Iterable[int]) -> bool:
    return all(sector_id in cluster for sector_id in real_ids)


def pick_endpoints(real_ids: List[int], prng: AleaPRNG) -> Tuple[int, int]:
    """Draw the spawn and exit sectors independently from the real sectors."""
    if not real_ids:
        raise GenerationError("No real sectors to place spawn and exit in")
    spawn_id = prng.choice(real_ids)
    exit_id = prng.choice(real_ids)
    return spawn_id, exit_id


def frontier_candidates(
    cluster: Set[int], connections: ConnectionSet, lattice: SectorLattice
) -> List[Tuple[int, int]]:
    """Unconnected edges from clustered sectors to adjacent sectors outside the cluster."""
    candidates = []
    for sector_id in sorted(cluster):
        for other in lattice.neighbors(sector_id):
            if other in cluster or connections.has(sector_id, other):
                continue
            candidates.append((sector_id, other))
    return candidates


def repair_connectivity(
    connections: ConnectionSet,
    lattice: SectorLattice,
    real_ids: List[int],
    spawn_id: int,
    prng: AleaPRNG,
    max_rounds: Optional[int] = None,
) -> RepairResult:
    """
    Add frontier edges until the spawn cluster contains every real sector.

    ``connections`` is extended in place.

    Args:
        connections: Candidate connections from the adjacency pass
        lattice: Sector lattice geometry
        real_ids: Sectors that must end up reachable
        spawn_id: Sector the cluster grows from
        prng: Random source for the whole generation call
        max_rounds: Upper bound on repair edges, defaults to the sector count

    Returns:
        RepairResult with the final cluster and the edges that were added

    Raises:
        GenerationError: if no candidate edge exists while real sectors are
            still unreachable, or the round limit is exceeded
    """
    if max_rounds is None:
        max_rounds = lattice.count
    result = RepairResult(cluster=get_cluster(connections, spawn_id))

    while not covers(result.cluster, real_ids):
        missing = sorted(set(real_ids) - result.cluster)
        if result.rounds >= max_rounds:
            raise GenerationError(
                f"Connectivity repair exceeded {max_rounds} rounds with sectors {missing} unreachable"
            )
        candidates = frontier_candidates(result.cluster, connections, lattice)
        if not candidates:
            raise GenerationError(
                f"No frontier edges left to reach sectors {missing} from spawn sector {spawn_id}"
            )
        a, b = prng.choice(candidates)
        connections.add(a, b)
        result.added.append(Connection.of(a, b))
        result.cluster = get_cluster(connections, spawn_id)

    logger.debug(
        "Connectivity repaired",
        spawn=spawn_id,
        cluster=len(result.cluster),
        added=result.rounds,
    )
    return result
