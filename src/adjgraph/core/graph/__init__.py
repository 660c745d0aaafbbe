"""
Graph module for adjgraph.

This module provides the adjacency list graph together with:
- Node, edge, arc and incidence iterators
- Dense property maps keyed by identity
- Insertion events
- A lock-holding wrapper for multi-threaded use
"""

from .base import AdjacencyListGraph
from .events import GraphEvent, GraphEventListener, GraphEventManager
from .filters import (
    BackEdgeFilter,
    IncEdgeFilter,
    IncidenceFilter,
    IsInFilter,
    IsOutFilter,
    NeighborNodeFilter,
)
from .iterators import (
    ArcIterator,
    BackEdgeIterator,
    EdgeIterator,
    IncEdgeIterator,
    IncidenceIterator,
    InArcIterator,
    ItemIterator,
    NeighborNodeIterator,
    NodeIterator,
    OutArcIterator,
)
from .maps import ArcMap, DenseMap, EdgeMap, NodeMap
from .state import GraphStateManager

__all__ = [
    "AdjacencyListGraph",
    # Events
    "GraphEvent",
    "GraphEventListener",
    "GraphEventManager",
    # Filters
    "IncidenceFilter",
    "NeighborNodeFilter",
    "IncEdgeFilter",
    "BackEdgeFilter",
    "IsInFilter",
    "IsOutFilter",
    # Iterators
    "ItemIterator",
    "NodeIterator",
    "EdgeIterator",
    "ArcIterator",
    "IncidenceIterator",
    "IncEdgeIterator",
    "BackEdgeIterator",
    "InArcIterator",
    "OutArcIterator",
    "NeighborNodeIterator",
    # Maps
    "DenseMap",
    "NodeMap",
    "EdgeMap",
    "ArcMap",
    # State
    "GraphStateManager",
]
