"""
adjgraph: an undirected adjacency list graph with stable integer identities.

Nodes, edges and arcs are addressed by integer ids that never change once
assigned. Arcs, the two directed views of every edge, are derived from the
edge ids without extra storage.
"""

from .core import (
    INVALID_ARC,
    INVALID_EDGE,
    INVALID_NODE,
    AdjacencyListGraph,
    Arc,
    ArcMap,
    Edge,
    EdgeMap,
    GraphConfig,
    GraphOperationError,
    GraphStateManager,
    Node,
    NodeMap,
)

__version__ = "0.1.0"

__all__ = [
    "AdjacencyListGraph",
    "Arc",
    "ArcMap",
    "Edge",
    "EdgeMap",
    "GraphConfig",
    "GraphOperationError",
    "GraphStateManager",
    "INVALID_ARC",
    "INVALID_EDGE",
    "INVALID_NODE",
    "Node",
    "NodeMap",
]
