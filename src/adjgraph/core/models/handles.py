"""
Entity handles for the adjacency list graph.

Nodes, edges and arcs are lightweight value types wrapping integer
identities. A handle whose id equals ``INVALID_ID`` is the invalid
sentinel; lookups answer with it instead of raising. Arcs are never
stored, they are derived from an edge id plus a direction (see
``AdjacencyListGraph.direct``).
"""

from dataclasses import dataclass

INVALID_ID = -1


@dataclass(frozen=True, order=True)
class Node:
    """
    Handle of a graph vertex.

    Attributes:
        id (int): Node identity, or ``INVALID_ID``
    """

    id: int = INVALID_ID

    @property
    def is_valid(self) -> bool:
        """Whether the handle refers to an identity at all."""
        return self.id != INVALID_ID


@dataclass(frozen=True, order=True)
class Edge:
    """
    Handle of an undirected edge.

    Attributes:
        id (int): Edge identity, or ``INVALID_ID``
    """

    id: int = INVALID_ID

    @property
    def is_valid(self) -> bool:
        """Whether the handle refers to an identity at all."""
        return self.id != INVALID_ID


@dataclass(frozen=True, order=True)
class Arc:
    """
    Handle of a directed view of an edge.

    Arc ids in ``[0, max_edge_id]`` are forward views of the edge with the
    same id; ids above that are backward views of ``edge_id``.

    Attributes:
        id (int): Arc identity, or ``INVALID_ID``
        edge_id (int): Identity of the underlying edge
    """

    id: int = INVALID_ID
    edge_id: int = INVALID_ID

    @property
    def is_valid(self) -> bool:
        """Whether the handle refers to an identity at all."""
        return self.id != INVALID_ID

    @property
    def edge(self) -> Edge:
        """The undirected edge this arc is a view of."""
        return Edge(self.edge_id)


INVALID_NODE = Node()
INVALID_EDGE = Edge()
INVALID_ARC = Arc()
