"""
Graph state management and transactions.

``AdjacencyListGraph`` performs read-modify-write sequences (append then
count, pad then claim) that are not atomic. This module wraps a graph for
use from several threads: every mutating call holds a lock for its whole
duration, reads and iteration hold it through ``locked()``, and
``transaction()`` restores the previous state if its body raises.
"""

import logging
from contextlib import contextmanager
from copy import deepcopy
from threading import RLock
from typing import Generator, Optional

from ..models import Edge, Node
from .base import AdjacencyListGraph, NodeLike

logger = logging.getLogger(__name__)


class GraphStateManager:
    """
    Owns a graph and serializes access to it.

    Attributes:
        _graph (AdjacencyListGraph): The managed graph instance
        _lock (RLock): Thread lock for synchronization
    """

    def __init__(self, graph: Optional[AdjacencyListGraph] = None):
        """
        Initialize the state manager.

        Args:
            graph (Optional[AdjacencyListGraph]): Initial graph instance.
                If None, creates a new empty graph.
        """
        self._graph = graph if graph is not None else AdjacencyListGraph()
        self._lock = RLock()

    def add_node(self, node_id: Optional[int] = None) -> Node:
        """Insert a node while holding the lock."""
        with self._lock:
            return self._graph.add_node(node_id)

    def add_edge(self, u_node: NodeLike, v_node: NodeLike) -> Edge:
        """Insert an edge while holding the lock."""
        with self._lock:
            return self._graph.add_edge(u_node, v_node)

    @contextmanager
    def locked(self) -> Generator[AdjacencyListGraph, None, None]:
        """
        Hold the lock for a block of reads or an iteration.

        Yields:
            AdjacencyListGraph: The managed graph
        """
        with self._lock:
            yield self._graph

    @contextmanager
    def transaction(self) -> Generator[AdjacencyListGraph, None, None]:
        """
        Context manager for atomic graph operations.

        Changes made within the transaction are atomic: if the body raises,
        the graph is replaced with a copy taken before the transaction and
        the exception propagates. Listeners of the graph do not follow the
        restored copy.

        Yields:
            AdjacencyListGraph: The graph to modify
        """
        with self._lock:
            state_backup = deepcopy(self._graph)
            try:
                yield self._graph
            except Exception:
                logger.debug("Rolling back graph transaction")
                self._graph = state_backup
                raise

    @property
    def graph(self) -> AdjacencyListGraph:
        """The managed graph; hold ``locked()`` while using it across threads."""
        return self._graph

    def snapshot(self) -> AdjacencyListGraph:
        """
        Get a snapshot of the current graph state.

        Returns:
            AdjacencyListGraph: Deep copy of the current graph, without listeners
        """
        with self._lock:
            return deepcopy(self._graph)
