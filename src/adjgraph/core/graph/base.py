"""
Undirected graph with stable integer identities.

This module provides ``AdjacencyListGraph``. Nodes and edges live in
append-only slot lists indexed by identity; arcs are not stored but derived
from an edge id and a direction. Callers may insert nodes at explicit,
possibly sparse ids: the storage is padded with tombstones and later
inserts may claim them.

The graph only grows. Lookups never raise for ordinary absence, they
answer with the invalid sentinel handle. Contract violations (such as the
maximum id of empty storage) raise ``GraphOperationError``.
"""

import logging
from typing import List, Optional, Union

from ..config import GraphConfig
from ..exceptions import GraphOperationError
from ..models import (
    INVALID_ARC,
    INVALID_EDGE,
    INVALID_ID,
    INVALID_NODE,
    Arc,
    Edge,
    EdgeStorage,
    Node,
    NodeStorage,
)
from .events import GraphEvent, GraphEventListener, GraphEventManager
from .iterators import (
    ArcIterator,
    BackEdgeIterator,
    EdgeIterator,
    IncEdgeIterator,
    IncidenceIterator,
    InArcIterator,
    NeighborNodeIterator,
    NodeIterator,
    OutArcIterator,
)

logger = logging.getLogger(__name__)

NodeLike = Union[Node, int]
Item = Union[Node, Edge, Arc]


class AdjacencyListGraph:
    """
    Undirected graph keyed by stable integer identities.

    Attributes:
        _nodes (List[NodeStorage]): Node slots indexed by id
        _edges (List[EdgeStorage]): Edge slots indexed by id
        _node_num (int): Number of live nodes
        _edge_num (int): Number of live edges
        _config (GraphConfig): Graph settings
        _events (GraphEventManager): Insertion listeners
    """

    is_directed = False

    def __init__(self, config: Optional[GraphConfig] = None, zero_start: Optional[bool] = None):
        """
        Initialize an empty graph.

        Args:
            config (Optional[GraphConfig]): Graph settings (default: GraphConfig())
            zero_start (Optional[bool]): Shortcut overriding ``config.zero_start``
        """
        if config is None:
            config = GraphConfig()
        if zero_start is not None and zero_start != config.zero_start:
            config = GraphConfig(
                zero_start=zero_start,
                padding_warning_threshold=config.padding_warning_threshold,
            )
        self._config = config
        self._nodes: List[NodeStorage] = []
        self._edges: List[EdgeStorage] = []
        self._node_num = 0
        self._edge_num = 0
        self._events = GraphEventManager()

        if not config.zero_start:
            self._nodes.append(NodeStorage(INVALID_ID))
            self._edges.append(EdgeStorage())

    def __repr__(self) -> str:
        return f"AdjacencyListGraph(nodes={self._node_num}, edges={self._edge_num})"

    @property
    def config(self) -> GraphConfig:
        return self._config

    @property
    def zero_start(self) -> bool:
        """Whether sequential identities start at 0 rather than 1."""
        return self._config.zero_start

    # Events

    def add_listener(self, listener: GraphEventListener) -> None:
        """Subscribe to insertion events."""
        self._events.add_listener(listener)

    def remove_listener(self, listener: GraphEventListener) -> None:
        """Unsubscribe from insertion events."""
        self._events.remove_listener(listener)

    # Sizes

    def node_num(self) -> int:
        return self._node_num

    def edge_num(self) -> int:
        return self._edge_num

    def arc_num(self) -> int:
        return 2 * self._edge_num

    def max_node_id(self) -> int:
        """
        Identity stored in the last node slot.

        Raises:
            GraphOperationError: If node storage is empty
        """
        if not self._nodes:
            raise GraphOperationError("max_node_id() of a graph without node storage")
        return self._nodes[-1].id

    def max_edge_id(self) -> int:
        """
        Identity stored in the last edge slot.

        Raises:
            GraphOperationError: If edge storage is empty
        """
        if not self._edges:
            raise GraphOperationError("max_edge_id() of a graph without edge storage")
        return self._edges[-1].id

    def max_arc_id(self) -> int:
        return 2 * self.max_edge_id() + 1

    def _last_node_id(self) -> int:
        return self._nodes[-1].id if self._nodes else INVALID_ID

    def _last_edge_id(self) -> int:
        return self._edges[-1].id if self._edges else INVALID_ID

    def degree(self, node: Node) -> int:
        """Number of edges incident to a live node."""
        return self._node_storage(node).number_of_edges()

    # Identities

    @staticmethod
    def id(item: Item) -> int:
        return item.id

    def node_from_id(self, node_id: int) -> Node:
        """Return the live node with this id, or the invalid node."""
        if 0 <= node_id < len(self._nodes) and not self._nodes[node_id].is_tombstone:
            return Node(node_id)
        return INVALID_NODE

    def edge_from_id(self, edge_id: int) -> Edge:
        """Return the live edge with this id, or the invalid edge."""
        if 0 <= edge_id < len(self._edges) and not self._edges[edge_id].is_tombstone:
            return Edge(edge_id)
        return INVALID_EDGE

    def arc_from_id(self, arc_id: int) -> Arc:
        """
        Return the arc with this id, or the invalid arc.

        Ids up to ``max_edge_id()`` are forward arcs of the edge with the
        same id; larger ids are backward arcs of edge
        ``arc_id - max_edge_id() - 1``. The arc is invalid if that edge is
        not live.
        """
        if arc_id < 0 or not self._edges:
            return INVALID_ARC
        max_edge_id = self.max_edge_id()
        if arc_id <= max_edge_id:
            if not self.edge_from_id(arc_id).is_valid:
                return INVALID_ARC
            return Arc(arc_id, arc_id)
        edge_id = arc_id - (max_edge_id + 1)
        if not self.edge_from_id(edge_id).is_valid:
            return INVALID_ARC
        return Arc(arc_id, edge_id)

    # Endpoints and directions

    def u(self, edge: Edge) -> Node:
        """First endpoint of an edge, as supplied on insertion."""
        if not self.edge_from_id(edge.id).is_valid:
            return INVALID_NODE
        return Node(self._edges[edge.id].u)

    def v(self, edge: Edge) -> Node:
        """Second endpoint of an edge, as supplied on insertion."""
        if not self.edge_from_id(edge.id).is_valid:
            return INVALID_NODE
        return Node(self._edges[edge.id].v)

    def direct(self, edge: Edge, forward: Union[bool, Node]) -> Arc:
        """
        Derive an arc from an edge.

        Args:
            edge (Edge): The edge to orient
            forward (Union[bool, Node]): Either a direction flag, or an
                endpoint of ``edge`` that becomes the arc's source

        Returns:
            Arc: The forward arc ``(id, id)`` or the backward arc
            ``(id + max_edge_id() + 1, id)``; the invalid arc for an invalid
            edge or a node that is not an endpoint
        """
        if not self.edge_from_id(edge.id).is_valid:
            return INVALID_ARC
        if isinstance(forward, Node):
            if self.u(edge) == forward:
                forward = True
            elif self.v(edge) == forward:
                forward = False
            else:
                return INVALID_ARC
        if forward:
            return Arc(edge.id, edge.id)
        return Arc(edge.id + self.max_edge_id() + 1, edge.id)

    def direction(self, arc: Arc) -> bool:
        """Whether an arc is the forward view of its edge."""
        return arc.id <= self.max_edge_id()

    def source(self, arc: Arc) -> Node:
        if not arc.is_valid:
            return INVALID_NODE
        edge = self.edge_from_id(arc.edge_id)
        return self.u(edge) if self.direction(arc) else self.v(edge)

    def target(self, arc: Arc) -> Node:
        if not arc.is_valid:
            return INVALID_NODE
        edge = self.edge_from_id(arc.edge_id)
        return self.v(edge) if self.direction(arc) else self.u(edge)

    def opposite_node(self, node: Node, edge: Edge) -> Node:
        """The endpoint of ``edge`` that is not ``node``, or the invalid node."""
        u_node = self.u(edge)
        v_node = self.v(edge)
        if u_node == node:
            return v_node
        if v_node == node:
            return u_node
        return INVALID_NODE

    def base_node(self, iterator: IncidenceIterator) -> Node:
        """The node an incidence iterator stands on."""
        return iterator.base_node()

    def running_node(self, iterator: IncidenceIterator) -> Node:
        """The node reached through the current entry of an incidence iterator."""
        return iterator.running_node()

    # Lookup

    def find_edge(self, a: Node, b: Node) -> Edge:
        """
        Find the edge between two nodes.

        Returns:
            Edge: The connecting edge; the invalid edge if ``a == b``, if
            either node is not live, or if the nodes are not adjacent
        """
        if a == b or not self.node_from_id(a.id).is_valid:
            return INVALID_EDGE
        edge_id = self._nodes[a.id].find_edge(b.id)
        if edge_id is None:
            return INVALID_EDGE
        return Edge(edge_id)

    def find_arc(self, u_node: Node, v_node: Node) -> Arc:
        """Find the arc leading from ``u_node`` to ``v_node``, or the invalid arc."""
        edge = self.find_edge(u_node, v_node)
        if not edge.is_valid:
            return INVALID_ARC
        return self.direct(edge, self.u(edge) == u_node)

    # Insertion

    def add_node(self, node_id: Optional[int] = None) -> Node:
        """
        Insert a node.

        Without an id the node takes the next sequential id. With an id:
        the next sequential id behaves the same; a tombstoned id is claimed;
        a live id is returned unchanged; an id past the end pads storage
        with tombstones first.

        Args:
            node_id (Optional[int]): Requested identity

        Returns:
            Node: The live node with the (requested) identity

        Raises:
            GraphOperationError: If ``node_id`` is negative, or 0 on a graph
                whose ids start at 1
        """
        size = len(self._nodes)
        if node_id is None or node_id == size:
            return self._append_node(size)
        first_id = 0 if self.zero_start else 1
        if node_id < first_id:
            raise GraphOperationError(f"Node ids must be at least {first_id}, got {node_id}")
        if node_id < size:
            existing = self.node_from_id(node_id)
            if existing.is_valid:
                return existing
            self._nodes[node_id] = NodeStorage(node_id)
            self._node_num += 1
            self._events.notify(GraphEvent.NODE_ADDED, {"node_id": node_id})
            return Node(node_id)

        padding = node_id - size
        if padding > self._config.padding_warning_threshold:
            logger.warning(
                "add_node(%d) pads node storage with %d tombstones", node_id, padding
            )
        else:
            logger.debug("Padding node storage with %d tombstones", padding)
        self._nodes.extend(NodeStorage(INVALID_ID) for _ in range(padding))
        self._events.notify(GraphEvent.NODES_PADDED, {"start": size, "count": padding})
        return self._append_node(node_id)

    def _append_node(self, node_id: int) -> Node:
        self._nodes.append(NodeStorage(node_id))
        self._node_num += 1
        self._events.notify(GraphEvent.NODE_ADDED, {"node_id": node_id})
        return Node(node_id)

    def add_edge(self, u_node: NodeLike, v_node: NodeLike) -> Edge:
        """
        Insert an edge between two nodes.

        Edges form a set keyed by the unordered endpoint pair: if the nodes
        are already adjacent the existing edge is returned. Integer
        endpoints are materialized with ``add_node`` first, so this may
        create nodes.

        Args:
            u_node (Union[Node, int]): First endpoint
            v_node (Union[Node, int]): Second endpoint

        Returns:
            Edge: The new or existing edge; the invalid edge if either
            endpoint handle is invalid or both endpoints are the same node
        """
        if isinstance(u_node, int) and isinstance(v_node, int):
            u_node = self.add_node(u_node)
            v_node = self.add_node(v_node)
        elif isinstance(u_node, int) or isinstance(v_node, int):
            raise GraphOperationError("add_edge() takes two node handles or two node ids")

        found = self.find_edge(u_node, v_node)
        if found.is_valid:
            return found
        if not (self.node_from_id(u_node.id).is_valid and self.node_from_id(v_node.id).is_valid):
            return INVALID_EDGE
        if u_node == v_node:
            return INVALID_EDGE

        edge_id = len(self._edges)
        self._edges.append(EdgeStorage(u_node.id, v_node.id, edge_id))
        self._nodes[u_node.id].insert(v_node.id, edge_id)
        self._nodes[v_node.id].insert(u_node.id, edge_id)
        self._edge_num += 1
        logger.debug("Added edge %d between nodes %d and %d", edge_id, u_node.id, v_node.id)
        self._events.notify(
            GraphEvent.EDGE_ADDED, {"edge_id": edge_id, "u": u_node.id, "v": v_node.id}
        )
        return Edge(edge_id)

    # Iteration

    def nodes(self, start: Optional[Node] = None) -> NodeIterator:
        """Iterate over live nodes in ascending id order."""
        return NodeIterator(self, start)

    def edges(self, start: Optional[Edge] = None) -> EdgeIterator:
        """Iterate over live edges in ascending id order."""
        return EdgeIterator(self, start)

    def arcs(self, start: Optional[Arc] = None) -> ArcIterator:
        """Iterate over all forward arcs, then all backward arcs."""
        return ArcIterator(self, start)

    def inc_edges(self, node: Node) -> IncEdgeIterator:
        return IncEdgeIterator(self, node)

    def back_edges(self, node: Node) -> BackEdgeIterator:
        return BackEdgeIterator(self, node)

    def out_arcs(self, node: Node) -> OutArcIterator:
        return OutArcIterator(self, node)

    def in_arcs(self, node: Node) -> InArcIterator:
        return InArcIterator(self, node)

    def neighbor_nodes(self, node: Node) -> NeighborNodeIterator:
        return NeighborNodeIterator(self, node)

    # Storage access for iterators, maps and validators

    def _node_storage(self, node: Node) -> NodeStorage:
        if not self.node_from_id(node.id).is_valid:
            raise GraphOperationError(f"Node {node.id} is not live")
        return self._nodes[node.id]
