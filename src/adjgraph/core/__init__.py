"""Core graph functionality."""

from .config import GraphConfig
from .exceptions import (
    ConfigurationError,
    EdgeNotFoundError,
    GraphOperationError,
    NodeNotFoundError,
    ResourceNotFoundError,
    ValidationError,
)
from .models import INVALID_ARC, INVALID_EDGE, INVALID_ID, INVALID_NODE, Arc, Edge, Node
from .graph import AdjacencyListGraph, ArcMap, EdgeMap, GraphStateManager, NodeMap
from .types import GraphProtocol

__all__ = [
    "AdjacencyListGraph",
    "Arc",
    "ArcMap",
    "ConfigurationError",
    "Edge",
    "EdgeMap",
    "EdgeNotFoundError",
    "GraphConfig",
    "GraphOperationError",
    "GraphProtocol",
    "GraphStateManager",
    "INVALID_ARC",
    "INVALID_EDGE",
    "INVALID_ID",
    "INVALID_NODE",
    "Node",
    "NodeMap",
    "NodeNotFoundError",
    "ResourceNotFoundError",
    "ValidationError",
]
