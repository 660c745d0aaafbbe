"""
Iterators over graph items.

Every iterator here is a small explicit state machine. It can be used as a
plain Python iterator (``for node in graph.nodes()``) and, for consumers
that want the begin/end pair protocol, it also supports ``item``,
``advance()``, ``at_end`` and equality. A default-constructed iterator
(no graph) is the canonical end: every exhausted iterator of the same
kind compares equal to it.

Iterators hold a non-owning reference to the graph. Inserting into the
graph while iterating is unsupported.
"""

from abc import ABC, abstractmethod
from copy import copy
from typing import TYPE_CHECKING, Generic, Optional, Type, TypeVar

from ..exceptions import GraphOperationError
from ..models import INVALID_ARC, INVALID_EDGE, INVALID_ID, INVALID_NODE, Arc, Edge, Node
from .filters import (
    BackEdgeFilter,
    IncEdgeFilter,
    IncidenceFilter,
    IsInFilter,
    IsOutFilter,
    NeighborNodeFilter,
)

if TYPE_CHECKING:
    from .base import AdjacencyListGraph

T = TypeVar("T")


class ItemIterator(ABC, Generic[T]):
    """
    Forward iterator over all live items of one kind in ascending id order.

    Construction from a graph positions the cursor on the first live id,
    skipping tombstones. Construction from a graph and an item resumes at
    that item.
    """

    _invalid: T

    def __init__(self, graph: Optional["AdjacencyListGraph"] = None, item: Optional[T] = None):
        self._graph = graph
        if graph is None:
            self._id = INVALID_ID
            self._item = self._invalid
        elif item is None:
            self._id = 0 if graph.zero_start else 1
            self._item = self._item_from_id(self._id)
            self._skip_tombstones()
        else:
            if not self._item_from_id(graph.id(item)).is_valid:
                raise GraphOperationError(f"Cannot start iteration at non-live item {item!r}")
            self._id = graph.id(item)
            self._item = item

    @abstractmethod
    def _item_from_id(self, item_id: int) -> T:
        """Handle of the live item with this id, or the invalid handle."""
        pass

    @abstractmethod
    def _max_item_id(self) -> int:
        """Largest id the iteration may reach."""
        pass

    def _skip_tombstones(self) -> None:
        while not self.at_end and not self._item.is_valid:
            self._id += 1
            self._item = self._item_from_id(self._id)

    @property
    def at_end(self) -> bool:
        return self._graph is None or self._id > self._max_item_id()

    @property
    def item(self) -> T:
        """The item under the cursor."""
        if self.at_end:
            raise GraphOperationError("Cannot dereference an exhausted iterator")
        return self._item

    def advance(self) -> None:
        """Move the cursor to the next live item."""
        if self.at_end:
            raise GraphOperationError("Cannot advance an exhausted iterator")
        self._id += 1
        self._item = self._item_from_id(self._id)
        self._skip_tombstones()

    def __iter__(self) -> "ItemIterator[T]":
        return self

    def __next__(self) -> T:
        if self.at_end:
            raise StopIteration
        item = self._item
        self.advance()
        return item

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        if self.at_end and other.at_end:
            return True
        return self.at_end == other.at_end and self._id == other._id

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        state = "end" if self.at_end else f"id={self._id}"
        return f"{type(self).__name__}({state})"


class NodeIterator(ItemIterator[Node]):
    """Iterates over all live nodes."""

    _invalid = INVALID_NODE

    def _item_from_id(self, item_id: int) -> Node:
        return self._graph.node_from_id(item_id)

    def _max_item_id(self) -> int:
        return self._graph._last_node_id()


class EdgeIterator(ItemIterator[Edge]):
    """Iterates over all live edges."""

    _invalid = INVALID_EDGE

    def _item_from_id(self, item_id: int) -> Edge:
        return self._graph.edge_from_id(item_id)

    def _max_item_id(self) -> int:
        return self._graph._last_edge_id()


class ArcIterator:
    """
    Forward iterator over all arcs.

    The iterator walks the live edges twice: the first half yields every
    forward arc, the second half every backward arc, both in ascending
    edge id order. Construction from an arc resumes at that arc, in the
    half its id belongs to.
    """

    def __init__(self, graph: Optional["AdjacencyListGraph"] = None, arc: Optional[Arc] = None):
        self._graph = graph
        if graph is None:
            self._pos = EdgeIterator()
            self._in_first_half = False
            self._very_end = True
        elif arc is None:
            self._pos = EdgeIterator(graph)
            empty = graph.edge_num() == 0
            self._in_first_half = not empty
            self._very_end = empty
        else:
            if not arc.is_valid or graph.arc_from_id(arc.id) != arc:
                raise GraphOperationError(f"Cannot start iteration at non-live arc {arc!r}")
            self._pos = EdgeIterator(graph, arc.edge)
            self._in_first_half = graph.direction(arc)
            self._very_end = False

    @property
    def at_end(self) -> bool:
        return self._very_end or self._graph is None

    @property
    def in_first_half(self) -> bool:
        """Whether the iterator is still yielding forward arcs."""
        return self._in_first_half

    @property
    def item(self) -> Arc:
        """The arc under the cursor."""
        if self.at_end:
            raise GraphOperationError("Cannot dereference an exhausted iterator")
        return self._graph.direct(self._pos.item, self._in_first_half)

    def advance(self) -> None:
        """Move to the next arc, switching halves when the edges run out."""
        if self.at_end:
            raise GraphOperationError("Cannot advance an exhausted iterator")
        self._pos.advance()
        if self._pos.at_end:
            if self._in_first_half:
                self._pos = EdgeIterator(self._graph)
                self._in_first_half = False
            else:
                self._very_end = True

    def __iter__(self) -> "ArcIterator":
        return self

    def __next__(self) -> Arc:
        if self.at_end:
            raise StopIteration
        arc = self.item
        self.advance()
        return arc

    def __copy__(self) -> "ArcIterator":
        clone = ArcIterator.__new__(ArcIterator)
        clone._graph = self._graph
        clone._pos = copy(self._pos)
        clone._in_first_half = self._in_first_half
        clone._very_end = self._very_end
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArcIterator):
            return NotImplemented
        return (
            self.at_end == other.at_end
            and self._in_first_half == other._in_first_half
            and (self.at_end or self._pos == other._pos)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.at_end:
            return "ArcIterator(end)"
        half = "forward" if self._in_first_half else "backward"
        return f"ArcIterator({half}, edge={self._pos.item.id})"


class IncidenceIterator(ABC):
    """
    Iterates over the incidence record of one node.

    Entries come in the order the node's incidence record holds them
    (ascending neighbor id). The class-level ``incidence_filter`` decides
    which entries are visited and what handle each one becomes.
    """

    incidence_filter: IncidenceFilter

    def __init__(self, graph: Optional["AdjacencyListGraph"] = None, node: Optional[Node] = None):
        self._graph = graph
        self._pos = 0
        if graph is None:
            self._own_id = INVALID_ID
            self._adjacencies = []
            return
        if node is None or not graph.node_from_id(node.id).is_valid:
            raise GraphOperationError(f"Cannot walk the incidence of non-live node {node!r}")
        self._own_id = node.id
        self._adjacencies = graph._node_storage(node).adjacencies
        self._skip_rejected()

    def _skip_rejected(self) -> None:
        while not self.at_end and not self.incidence_filter.accept(
            self._graph, self._own_id, self._adjacencies[self._pos]
        ):
            self._pos += 1

    @property
    def at_end(self) -> bool:
        return self._graph is None or self._pos >= len(self._adjacencies)

    @property
    def node(self) -> Node:
        """The node whose incidence record is being walked."""
        return Node(self._own_id)

    @property
    def item(self):
        """The handle under the cursor."""
        if self.at_end:
            raise GraphOperationError("Cannot dereference an exhausted iterator")
        return self.incidence_filter.transform(
            self._graph, self._own_id, self._adjacencies[self._pos]
        )

    def advance(self) -> None:
        if self.at_end:
            raise GraphOperationError("Cannot advance an exhausted iterator")
        self._pos += 1
        self._skip_rejected()

    def base_node(self) -> Node:
        return self.node

    @abstractmethod
    def running_node(self) -> Node:
        """The node reached through the current entry."""
        pass

    def __iter__(self) -> "IncidenceIterator":
        return self

    def __next__(self):
        if self.at_end:
            raise StopIteration
        item = self.item
        self.advance()
        return item

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        if self.at_end and other.at_end:
            return True
        return (
            self.at_end == other.at_end
            and self._own_id == other._own_id
            and self._pos == other._pos
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        state = "end" if self.at_end else f"node={self._own_id}, pos={self._pos}"
        return f"{type(self).__name__}({state})"


class IncEdgeIterator(IncidenceIterator):
    """Incident edges of a node."""

    incidence_filter = IncEdgeFilter()

    def running_node(self) -> Node:
        return self._graph.opposite_node(self.node, self.item)


class BackEdgeIterator(IncEdgeIterator):
    """Incident edges of a node leading to neighbors with a smaller id."""

    incidence_filter = BackEdgeFilter()


class NeighborNodeIterator(IncidenceIterator):
    """Neighbors of a node."""

    incidence_filter = NeighborNodeFilter()

    def running_node(self) -> Node:
        return self.item


class OutArcIterator(IncidenceIterator):
    """Arcs leaving a node."""

    incidence_filter = IsOutFilter()

    def base_node(self) -> Node:
        return self._graph.source(self.item)

    def running_node(self) -> Node:
        return self._graph.target(self.item)


class InArcIterator(IncidenceIterator):
    """Arcs entering a node."""

    incidence_filter = IsInFilter()

    def base_node(self) -> Node:
        return self._graph.target(self.item)

    def running_node(self) -> Node:
        return self._graph.source(self.item)


def end_of(iterator_class: Type[T]) -> T:
    """Return the canonical end sentinel of an iterator class."""
    return iterator_class()
