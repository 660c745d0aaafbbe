"""
Tests for dense property maps.
"""

import pytest

from adjgraph.core.exceptions import GraphOperationError
from adjgraph.core.graph import AdjacencyListGraph, ArcMap, DenseMap, EdgeMap, NodeMap
from adjgraph.core.models import INVALID_NODE, Arc, Edge, Node


def test_node_map_grows_with_graph(graph):
    """Test that a bound map grows as nodes are added."""
    weights = NodeMap(graph, default=0)
    assert len(weights) == 0

    graph.add_node()
    graph.add_node(4)

    assert len(weights) == 5
    assert weights[Node(4)] == 0


def test_node_map_get_set(sparse_graph):
    """Test reading and writing node values."""
    labels = NodeMap(sparse_graph, default="unlabeled")
    labels[Node(2)] = "hub"

    assert labels[Node(2)] == "hub"
    assert labels[Node(0)] == "unlabeled"
    assert list(labels.items()) == [
        (Node(0), "unlabeled"),
        (Node(2), "hub"),
        (Node(5), "unlabeled"),
    ]


def test_unbound_map_raises():
    """Test that an unbound map cannot be used."""
    labels = NodeMap()
    assert not labels.is_bound

    with pytest.raises(GraphOperationError, match="not bound"):
        labels[Node(0)]
    with pytest.raises(GraphOperationError, match="not bound"):
        labels[Node(0)] = 1


def test_attach_later(triangle_graph):
    """Test binding a default-constructed map to a graph."""
    weights = EdgeMap(default=1.0)
    weights.attach(triangle_graph)

    assert weights.is_bound
    assert len(weights) == 3
    weights[Edge(1)] = 2.5
    assert [value for _, value in weights.items()] == [1.0, 2.5, 1.0]


def test_detach(triangle_graph):
    """Test unbinding a map."""
    weights = EdgeMap(triangle_graph, default=1.0)
    weights.detach()

    assert not weights.is_bound
    assert len(weights) == 0


def test_map_rejects_invalid_keys(triangle_graph):
    """Test that invalid, foreign and out-of-range keys are rejected."""
    labels = NodeMap(triangle_graph)

    with pytest.raises(GraphOperationError, match="invalid"):
        labels[INVALID_NODE]
    with pytest.raises(GraphOperationError, match="keyed by Node"):
        labels[Edge(0)]
    with pytest.raises(GraphOperationError, match="maximum id"):
        labels[Node(100)]


def test_fill(triangle_graph):
    """Test setting every slot at once."""
    labels = NodeMap(triangle_graph)
    labels.fill(7)

    assert [value for _, value in labels.items()] == [7, 7, 7]


def test_arc_map_size(triangle_graph):
    """Test that an arc map has one slot per arc id."""
    arc_map = ArcMap(triangle_graph)
    assert len(arc_map) == triangle_graph.max_arc_id() + 1


def test_arc_map_relocates_backward_arcs(graph):
    """Test that values follow backward arcs when the maximum edge id grows."""
    edge = graph.add_edge(0, 1)
    flow = ArcMap(graph, default=0)
    flow[graph.direct(edge, True)] = 3
    flow[graph.direct(edge, False)] = -3
    assert graph.direct(edge, False) == Arc(1, 0)

    graph.add_edge(1, 2)
    graph.add_edge(2, 3)

    assert graph.direct(edge, False) == Arc(3, 0)
    assert flow[graph.direct(edge, True)] == 3
    assert flow[graph.direct(edge, False)] == -3
    assert flow[graph.direct(Edge(2), False)] == 0
    assert len(flow) == 6


def test_arc_map_items(triangle_graph):
    """Test iterating arc values in arc iteration order."""
    arc_map = ArcMap(triangle_graph, default=0)
    for arc in triangle_graph.arcs():
        arc_map[arc] = triangle_graph.source(arc).id

    assert [value for _, value in arc_map.items()] == [0, 1, 2, 1, 2, 0]


def test_maps_on_one_based_graph():
    """Test maps over a graph with placeholder slots."""
    g = AdjacencyListGraph(zero_start=False)
    nodes = NodeMap(g, default=0)
    arcs = ArcMap(g, default=0)
    assert len(nodes) == 0
    assert len(arcs) == 0

    g.add_edge(1, 2)

    assert len(nodes) == 3
    assert len(arcs) == 4
    arcs[g.direct(Edge(1), False)] = 9
    assert arcs[Arc(3, 1)] == 9


def test_dense_map_is_abstract(triangle_graph):
    """Test that the base map cannot be instantiated."""
    with pytest.raises(TypeError):
        DenseMap(triangle_graph)


def test_mutable_default_is_shared(triangle_graph):
    """Test that a plain default object fills every unwritten slot."""
    members = NodeMap(triangle_graph, default=[])
    members[Node(0)].append("a")
    assert members[Node(1)] == ["a"]


def test_default_factory(triangle_graph):
    """Test that a default factory gives every slot its own value."""
    members = NodeMap(triangle_graph, default_factory=list)
    members[Node(0)].append("a")

    assert members[Node(0)] == ["a"]
    assert members[Node(1)] == []

    node = triangle_graph.add_node()
    assert members[node] == []
    assert members[node] is not members[Node(1)]


def test_arc_map_default_factory_survives_relocation(graph):
    """Test that relocated backward arcs keep their own values."""
    graph.add_edge(0, 1)
    paths = ArcMap(graph, default_factory=list)
    backward = graph.direct(Edge(0), False)
    paths[backward].append("kept")

    graph.add_edge(1, 2)

    assert paths[graph.direct(Edge(0), False)] == ["kept"]
    assert paths[graph.direct(Edge(1), False)] == []
    assert paths[graph.direct(Edge(1), True)] is not paths[graph.direct(Edge(0), True)]
