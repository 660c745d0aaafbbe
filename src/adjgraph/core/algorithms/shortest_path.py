"""
Dijkstra shortest paths over an adjacency list graph.

The finder only talks to the graph through the consumer protocol and
incidence iteration. Edge weights come from an ``EdgeMap``; without one
every edge weighs 1.
"""

import logging
from dataclasses import dataclass, field
from heapq import heappop, heappush
from typing import Dict, List, Optional, Tuple

from ..exceptions import GraphOperationError, NodeNotFoundError
from ..graph.maps import EdgeMap
from ..models import Edge, Node
from ..types import GraphProtocol

logger = logging.getLogger(__name__)

State = Tuple[int, int]


class NegativeWeightError(GraphOperationError):
    """Raised when negative weights are detected in the graph."""

    pass


@dataclass
class PathResult:
    """
    Container for path finding results.

    Attributes:
        nodes: Sequence of nodes from start to end
        edges: Edges connecting consecutive nodes
        total_weight: Sum of the edge weights along the path
    """

    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)
    total_weight: float = 0.0

    @property
    def length(self) -> int:
        return len(self.edges)


class ShortestPathFinder:
    """Single-pair shortest paths with non-negative edge weights."""

    def __init__(self, graph: GraphProtocol):
        self.graph = graph

    def _weight(self, weights: Optional[EdgeMap], edge: Edge) -> float:
        if weights is None:
            return 1.0
        weight = weights[edge]
        if weight is None:
            raise GraphOperationError(f"No weight set for edge {edge.id}")
        return float(weight)

    def _check_weights(self, weights: EdgeMap) -> None:
        for edge, weight in weights.items():
            if weight is not None and weight < 0:
                raise NegativeWeightError(
                    f"Negative weight {weight} found on edge "
                    f"{self.graph.u(edge).id} - {self.graph.v(edge).id}"
                )

    def find_path(
        self,
        start_node: Node,
        end_node: Node,
        weights: Optional[EdgeMap] = None,
        max_length: Optional[int] = None,
    ) -> Optional[PathResult]:
        """
        Find a cheapest path between two nodes.

        Args:
            start_node (Node): Where the path starts
            end_node (Node): Where the path ends
            weights (Optional[EdgeMap]): Non-negative edge weights
            max_length (Optional[int]): Maximum number of edges on the path

        Returns:
            Optional[PathResult]: The path, or None if ``end_node`` is unreachable

        Raises:
            NodeNotFoundError: If either endpoint is not a live node
            NegativeWeightError: If any edge weight is negative
        """
        for node in (start_node, end_node):
            if not self.graph.node_from_id(node.id).is_valid:
                raise NodeNotFoundError(f"Node {node.id} not found in the graph")
        if weights is not None:
            self._check_weights(weights)

        # With a length limit a node may be reached again by a costlier but
        # shorter path, so labels are kept per (node, edges used).
        start: State = (start_node.id, 0)
        distances: Dict[State, float] = {start: 0.0}
        predecessors: Dict[State, Tuple[State, Edge]] = {}

        queue: List[Tuple[float, State]] = [(0.0, start)]
        while queue:
            current_dist, state = heappop(queue)
            if current_dist > distances[state]:
                continue
            current_id, used = state
            if current_id == end_node.id:
                return self._build_result(state, predecessors, current_dist)
            if max_length is not None and used >= max_length:
                continue

            current = Node(current_id)
            for edge in self.graph.inc_edges(current):
                neighbor = self.graph.opposite_node(current, edge)
                new_dist = current_dist + self._weight(weights, edge)
                next_state = (neighbor.id, used + 1 if max_length is not None else 0)
                known = distances.get(next_state)
                if known is None or new_dist < known:
                    distances[next_state] = new_dist
                    predecessors[next_state] = (state, edge)
                    heappush(queue, (new_dist, next_state))

        logger.debug("No path from node %d to node %d", start_node.id, end_node.id)
        return None

    def _build_result(
        self,
        state: State,
        predecessors: Dict[State, Tuple[State, Edge]],
        total_weight: float,
    ) -> PathResult:
        nodes = [Node(state[0])]
        edges: List[Edge] = []
        while state in predecessors:
            state, edge = predecessors[state]
            edges.append(edge)
            nodes.append(Node(state[0]))
        nodes.reverse()
        edges.reverse()
        return PathResult(nodes=nodes, edges=edges, total_weight=total_weight)
