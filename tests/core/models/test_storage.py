"""
Tests for node and edge slot storage.
"""

from adjgraph.core.models import INVALID_ID, Adjacency, EdgeStorage, NodeStorage


def test_node_storage_tombstone():
    """Test tombstone detection of node slots."""
    assert NodeStorage().is_tombstone
    assert NodeStorage(INVALID_ID).is_tombstone
    assert not NodeStorage(0).is_tombstone


def test_node_storage_keeps_neighbors_sorted():
    """Test that the incidence record is ordered by neighbor id."""
    slot = NodeStorage(0)
    slot.insert(7, 0)
    slot.insert(2, 1)
    slot.insert(5, 2)

    assert list(slot) == [Adjacency(2, 1), Adjacency(5, 2), Adjacency(7, 0)]
    assert slot.number_of_edges() == 3
    assert len(slot) == 3


def test_node_storage_find_edge():
    """Test edge lookup by neighbor id."""
    slot = NodeStorage(0)
    slot.insert(4, 10)
    slot.insert(1, 11)

    assert slot.find_edge(4) == 10
    assert slot.find_edge(1) == 11
    assert slot.find_edge(2) is None
    assert slot.find_edge(99) is None


def test_node_storage_ignores_duplicate_neighbor():
    """Test that re-inserting a neighbor keeps the original edge."""
    slot = NodeStorage(0)
    slot.insert(3, 1)
    slot.insert(3, 2)

    assert slot.number_of_edges() == 1
    assert slot.find_edge(3) == 1


def test_edge_storage():
    """Test edge slots and their tombstones."""
    edge = EdgeStorage(2, 5, 0)
    assert (edge.u, edge.v, edge.id) == (2, 5, 0)
    assert not edge.is_tombstone
    assert EdgeStorage().is_tombstone
