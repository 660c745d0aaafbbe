"""Shared test fixtures."""

import pytest

from adjgraph.core.graph import AdjacencyListGraph
from adjgraph.core.models import Node


@pytest.fixture
def graph() -> AdjacencyListGraph:
    """Fixture providing an empty zero-based graph."""
    return AdjacencyListGraph()


@pytest.fixture
def triangle_graph() -> AdjacencyListGraph:
    """
    Fixture providing a triangle.

    Edges: 0 = (0, 1), 1 = (1, 2), 2 = (2, 0).
    """
    graph = AdjacencyListGraph()
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)
    graph.add_edge(2, 0)
    return graph


@pytest.fixture
def sparse_graph() -> AdjacencyListGraph:
    """
    Fixture providing a graph with tombstoned node slots.

    Live nodes: 0, 2, 5. Edges: 0 = (0, 2), 1 = (2, 5).
    """
    graph = AdjacencyListGraph()
    graph.add_node(0)
    graph.add_node(5)
    graph.add_node(2)
    graph.add_edge(Node(0), Node(2))
    graph.add_edge(Node(2), Node(5))
    return graph


@pytest.fixture
def one_based_graph() -> AdjacencyListGraph:
    """
    Fixture providing a graph whose ids start at 1.

    Edges: 1 = (1, 2), 2 = (2, 3).
    """
    graph = AdjacencyListGraph(zero_start=False)
    graph.add_edge(1, 2)
    graph.add_edge(2, 3)
    return graph
