"""
Tests for thread-safe graph state management.
"""

import threading

import pytest

from adjgraph.core.graph import AdjacencyListGraph, GraphStateManager
from adjgraph.core.models import Edge, Node
from adjgraph.utils.validation import GraphIntegrityValidator


def test_manager_creates_graph():
    """Test that a manager without a graph creates an empty one."""
    manager = GraphStateManager()
    assert isinstance(manager.graph, AdjacencyListGraph)
    assert manager.graph.node_num() == 0


def test_manager_insertions(triangle_graph):
    """Test inserting through the manager."""
    manager = GraphStateManager(triangle_graph)

    assert manager.add_node() == Node(3)
    assert manager.add_edge(0, 3) == Edge(3)
    assert manager.add_edge(3, 0) == Edge(3)
    with manager.locked() as graph:
        assert graph.edge_num() == 4


def test_concurrent_insertions():
    """Test that concurrent inserts through the manager keep counts correct."""
    manager = GraphStateManager()
    workers = 8
    per_worker = 50

    def insert(worker: int) -> None:
        base = worker * per_worker * 2
        for offset in range(per_worker):
            manager.add_edge(base + 2 * offset, base + 2 * offset + 1)

    threads = [threading.Thread(target=insert, args=(worker,)) for worker in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    with manager.locked() as graph:
        assert graph.node_num() == workers * per_worker * 2
        assert graph.edge_num() == workers * per_worker
        assert GraphIntegrityValidator.validate(graph).is_valid


def test_transaction_commit():
    """Test that a successful transaction keeps its changes."""
    manager = GraphStateManager()
    with manager.transaction() as graph:
        graph.add_edge(0, 1)

    assert manager.graph.edge_num() == 1


def test_transaction_rollback(triangle_graph):
    """Test that a failing transaction restores the previous state."""
    manager = GraphStateManager(triangle_graph)

    with pytest.raises(RuntimeError, match="abort"):
        with manager.transaction() as graph:
            graph.add_node(10)
            graph.add_edge(0, 10)
            raise RuntimeError("abort")

    assert manager.graph.node_num() == 3
    assert manager.graph.edge_num() == 3
    assert not manager.graph.node_from_id(10).is_valid
    assert list(manager.graph.edges()) == [Edge(0), Edge(1), Edge(2)]


def test_snapshot_is_independent(triangle_graph):
    """Test that snapshots do not follow later insertions."""
    manager = GraphStateManager(triangle_graph)
    snapshot = manager.snapshot()

    manager.add_edge(2, 3)

    assert snapshot.edge_num() == 3
    assert manager.graph.edge_num() == 4
    assert snapshot.find_edge(Node(0), Node(1)) == Edge(0)
