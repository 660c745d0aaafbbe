"""
Core type definitions and the consumer protocol.

Graph algorithms consume the container through ``GraphProtocol`` and the
free functions below. Iteration follows a begin/end pair protocol: each
function returns a fresh iterator positioned on the first item together
with the canonical end sentinel of the same iterator kind.
"""

from typing import Iterator, Optional, Protocol, Tuple

from .exceptions import EdgeNotFoundError
from .graph.iterators import (
    ArcIterator,
    EdgeIterator,
    IncEdgeIterator,
    NodeIterator,
    end_of,
)
from .models import Arc, Edge, Node


class GraphProtocol(Protocol):
    """Protocol defining the graph operations consumers rely on."""

    def node_num(self) -> int:
        ...

    def edge_num(self) -> int:
        ...

    def arc_num(self) -> int:
        ...

    def degree(self, node: Node) -> int:
        ...

    def u(self, edge: Edge) -> Node:
        ...

    def v(self, edge: Edge) -> Node:
        ...

    def source(self, arc: Arc) -> Node:
        ...

    def target(self, arc: Arc) -> Node:
        ...

    def opposite_node(self, node: Node, edge: Edge) -> Node:
        ...

    def node_from_id(self, node_id: int) -> Node:
        ...

    def max_node_id(self) -> int:
        ...

    def nodes(self, start: Optional[Node] = None) -> Iterator[Node]:
        ...

    def edges(self, start: Optional[Edge] = None) -> Iterator[Edge]:
        ...

    def arcs(self, start: Optional[Arc] = None) -> Iterator[Arc]:
        ...

    def inc_edges(self, node: Node) -> Iterator[Edge]:
        ...


def num_vertices(graph: GraphProtocol) -> int:
    return graph.node_num()


def num_edges(graph: GraphProtocol) -> int:
    return graph.edge_num()


def degree(node: Node, graph: GraphProtocol) -> int:
    return graph.degree(node)


def in_degree(node: Node, graph: GraphProtocol) -> int:
    """Equal to the degree: every incident edge of an undirected graph enters the node."""
    return graph.degree(node)


def out_degree(node: Node, graph: GraphProtocol) -> int:
    """Equal to the degree: every incident edge of an undirected graph leaves the node."""
    return graph.degree(node)


def edge_source(edge: Edge, graph: GraphProtocol) -> Node:
    """
    First endpoint of a live edge.

    Raises:
        EdgeNotFoundError: If ``edge`` is not a live edge of ``graph``
    """
    return _endpoint(graph.u(edge), edge)


def edge_target(edge: Edge, graph: GraphProtocol) -> Node:
    """
    Second endpoint of a live edge.

    Raises:
        EdgeNotFoundError: If ``edge`` is not a live edge of ``graph``
    """
    return _endpoint(graph.v(edge), edge)


def _endpoint(node: Node, edge: Edge) -> Node:
    if not node.is_valid:
        raise EdgeNotFoundError(f"Edge {edge.id} not found in the graph")
    return node


def vertices(graph: GraphProtocol) -> Tuple[NodeIterator, NodeIterator]:
    return graph.nodes(), end_of(NodeIterator)


def edges(graph: GraphProtocol) -> Tuple[EdgeIterator, EdgeIterator]:
    return graph.edges(), end_of(EdgeIterator)


def arcs(graph: GraphProtocol) -> Tuple[ArcIterator, ArcIterator]:
    return graph.arcs(), end_of(ArcIterator)


def in_edges(node: Node, graph: GraphProtocol) -> Tuple[IncEdgeIterator, IncEdgeIterator]:
    return graph.inc_edges(node), end_of(IncEdgeIterator)


def out_edges(node: Node, graph: GraphProtocol) -> Tuple[IncEdgeIterator, IncEdgeIterator]:
    return graph.inc_edges(node), end_of(IncEdgeIterator)
