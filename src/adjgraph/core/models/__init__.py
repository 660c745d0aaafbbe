"""
Core models package for the adjacency list graph.

This package provides the entity handles handed out to callers and the
slot storage the container keeps behind them.
"""

from .handles import INVALID_ARC, INVALID_EDGE, INVALID_ID, INVALID_NODE, Arc, Edge, Node
from .storage import Adjacency, EdgeStorage, NodeStorage

__all__ = [
    # Handles
    "INVALID_ID",
    "INVALID_NODE",
    "INVALID_EDGE",
    "INVALID_ARC",
    "Node",
    "Edge",
    "Arc",
    # Storage
    "Adjacency",
    "NodeStorage",
    "EdgeStorage",
]
