"""Tests for adjacency connections."""

import pytest

from py_dungeon.core.alea_prng import AleaPRNG
from py_dungeon.core.connections import Connection, ConnectionSet, connect_adjacent
from py_dungeon.core.rooms import place_rooms
from py_dungeon.core.sectors import SectorLayout, build_lattice, partition_sectors


class TestConnection:
    """Test canonical connection pairs."""

    def test_canonical_order(self):
        """Test that pairs are stored low id first."""
        assert Connection.of(5, 2) == Connection(2, 5)
        assert Connection.of(2, 5) == Connection(2, 5)

    def test_self_loop_rejected(self):
        """Test that a sector cannot connect to itself."""
        with pytest.raises(ValueError):
            Connection.of(3, 3)


class TestConnectionSet:
    """Test deduplication and membership."""

    def test_deduplicates_either_order(self):
        """Test deduplication of reversed pairs."""
        connections = ConnectionSet()
        assert connections.add(1, 2)
        assert not connections.add(2, 1)
        assert len(connections) == 1

    def test_membership_is_order_independent(self):
        """Test membership in either order."""
        connections = ConnectionSet([(4, 1)])
        assert (1, 4) in connections
        assert (4, 1) in connections
        assert connections.has(1, 4)
        assert not connections.has(1, 1)

    def test_insertion_order_preserved(self):
        """Test iteration in insertion order."""
        connections = ConnectionSet([(3, 2), (0, 1), (1, 2)])
        assert list(connections) == [Connection(2, 3), Connection(0, 1), Connection(1, 2)]

    def test_partners(self):
        """Test partner lookup."""
        connections = ConnectionSet([(0, 1), (1, 2), (1, 4)])
        assert sorted(connections.partners(1)) == [0, 2, 4]
        assert connections.partners(3) == []


class TestConnectAdjacent:
    """Test random adjacency edge selection."""

    def _build(self, seed, rows=3, columns=4, real=6, skip=0.5):
        prng = AleaPRNG(seed)
        layout = partition_sectors(32, 56, rows, columns, real, prng)
        rooms = place_rooms(layout, prng)
        return layout, rooms, connect_adjacent(rooms, layout.lattice, prng, skip)

    def test_endpoints_are_adjacent(self):
        """Test that every connection joins adjacent sectors."""
        for i in range(30):
            layout, _, connections = self._build(f"adj{i}")
            for low, high in connections:
                assert low < high
                assert layout.lattice.are_adjacent(low, high)

    def test_no_duplicates(self):
        """Test that no connection appears twice."""
        for i in range(30):
            _, _, connections = self._build(f"dup{i}")
            pairs = list(connections)
            assert len(pairs) == len(set(pairs))

    def test_every_real_room_has_an_edge(self):
        """Test that every real room picks at least one neighbor."""
        for i in range(30):
            layout, _, connections = self._build(f"real{i}")
            for sector_id in layout.real_ids:
                assert connections.partners(sector_id)

    def test_dummies_always_skipped(self):
        """Test a skip chance of one."""
        for i in range(20):
            layout, _, connections = self._build(f"skip{i}", skip=1.0)
            for low, high in connections:
                assert low in layout.real_ids or high in layout.real_ids

    def test_dummies_never_skipped(self):
        """Test a skip chance of zero."""
        for i in range(20):
            layout, rooms, connections = self._build(f"noskip{i}", skip=0.0)
            for room in rooms:
                assert connections.partners(room.id)

    def test_single_sector_has_no_connections(self):
        """Test a 1x1 lattice."""
        lattice = build_lattice(12, 20, 1, 1)
        layout = SectorLayout(lattice, [0])
        prng = AleaPRNG("single")
        rooms = place_rooms(layout, prng)
        assert len(connect_adjacent(rooms, lattice, prng)) == 0
