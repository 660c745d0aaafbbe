"""
Incidence filters.

A filter decides which entries of a node's incidence record an incidence
iterator visits, and turns each visited entry into the handle the
iterator yields. The graph is undirected, so every incident edge is both
an incoming and an outgoing arc; the in/out filters only differ in how
they orient the arc.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Union

from ..models import Adjacency, Arc, Edge, Node

if TYPE_CHECKING:
    from .base import AdjacencyListGraph


class IncidenceFilter(ABC):
    """Base class for incidence filters; accepts every entry."""

    def accept(self, graph: "AdjacencyListGraph", own_id: int, adjacency: Adjacency) -> bool:
        return True

    @abstractmethod
    def transform(
        self, graph: "AdjacencyListGraph", own_id: int, adjacency: Adjacency
    ) -> Union[Node, Edge, Arc]:
        """Turn an accepted entry into the handle the iterator yields."""
        pass


class NeighborNodeFilter(IncidenceFilter):
    """Yields the neighbor reached through each incident edge."""

    def transform(self, graph, own_id, adjacency):
        return Node(adjacency.node_id)


class IncEdgeFilter(IncidenceFilter):
    """Yields each incident edge."""

    def transform(self, graph, own_id, adjacency):
        return Edge(adjacency.edge_id)


class BackEdgeFilter(IncEdgeFilter):
    """Yields incident edges leading to neighbors with a smaller id."""

    def accept(self, graph, own_id, adjacency):
        return adjacency.node_id < own_id


class IsOutFilter(IncidenceFilter):
    """Yields each incident edge as an arc leaving the walked node."""

    def transform(self, graph, own_id, adjacency):
        return graph.direct(Edge(adjacency.edge_id), Node(own_id))


class IsInFilter(IncidenceFilter):
    """Yields each incident edge as an arc entering the walked node."""

    def transform(self, graph, own_id, adjacency):
        return graph.direct(Edge(adjacency.edge_id), Node(adjacency.node_id))
