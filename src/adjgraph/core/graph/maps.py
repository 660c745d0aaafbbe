"""
Dense property maps keyed by node, edge or arc identity.

Attributes such as weights or labels are not stored in the graph; they are
layered on top with these maps. A map bound to a graph subscribes to its
insertion events and keeps one slot per identity, up to the graph's
current maximum id.
"""

import logging
from abc import ABC, abstractmethod
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Generic,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
)

from ..exceptions import GraphOperationError
from ..models import Arc, Edge, Node
from .events import GraphEvent

if TYPE_CHECKING:
    from .base import AdjacencyListGraph

logger = logging.getLogger(__name__)

V = TypeVar("V")


class DenseMap(ABC, Generic[V]):
    """
    Base class of the dense property maps.

    Slots that were never written hold ``default``. The same ``default``
    object fills every such slot, so mutable defaults are shared; pass
    ``default_factory`` to give each slot its own value instead.

    Attributes:
        default (V): Value of slots that were never written
        default_factory (Optional[Callable[[], V]]): Builds the value of each
            new slot; takes precedence over ``default``
    """

    key_type: type = object

    def __init__(
        self,
        graph: Optional["AdjacencyListGraph"] = None,
        default: V = None,
        default_factory: Optional[Callable[[], V]] = None,
    ):
        self.default = default
        self.default_factory = default_factory
        self._graph: Optional["AdjacencyListGraph"] = None
        self._data: List[V] = []
        if graph is not None:
            self.attach(graph)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._data)}, bound={self.is_bound})"

    @property
    def is_bound(self) -> bool:
        return self._graph is not None

    @property
    def graph(self) -> "AdjacencyListGraph":
        if self._graph is None:
            raise GraphOperationError(f"{type(self).__name__} is not bound to a graph")
        return self._graph

    def attach(self, graph: "AdjacencyListGraph") -> None:
        """
        Bind the map to a graph, discarding previously stored values.

        Args:
            graph (AdjacencyListGraph): The graph whose identities key the map
        """
        if self._graph is not None:
            self._graph.remove_listener(self)
        self._graph = graph
        self._data = []
        graph.add_listener(self)
        self._grow()

    def detach(self) -> None:
        """Unbind the map from its graph."""
        if self._graph is not None:
            self._graph.remove_listener(self)
        self._graph = None
        self._data = []

    def on_state_change(self, event: GraphEvent, details: Dict[str, Any]) -> None:
        self._grow()

    @abstractmethod
    def _required_size(self) -> int:
        """Number of slots the bound graph currently needs."""
        pass

    def _new_slots(self, count: int) -> List[V]:
        if self.default_factory is not None:
            return [self.default_factory() for _ in range(count)]
        return [self.default] * count

    def _grow(self) -> None:
        missing = self._required_size() - len(self._data)
        if missing > 0:
            self._data.extend(self._new_slots(missing))

    def _index(self, key) -> int:
        if not isinstance(key, self.key_type):
            raise GraphOperationError(
                f"{type(self).__name__} is keyed by {self.key_type.__name__}, got {key!r}"
            )
        if not key.is_valid:
            raise GraphOperationError(f"Cannot index {type(self).__name__} with invalid {key!r}")
        if self._graph is None:
            raise GraphOperationError(f"{type(self).__name__} is not bound to a graph")
        self._grow()
        if key.id >= len(self._data):
            raise GraphOperationError(f"{key!r} is beyond the graph's maximum id")
        return key.id

    def __getitem__(self, key) -> V:
        return self._data[self._index(key)]

    def __setitem__(self, key, value: V) -> None:
        self._data[self._index(key)] = value

    def __len__(self) -> int:
        return len(self._data)

    def fill(self, value: V) -> None:
        """Set every slot, including tombstoned ones, to ``value``."""
        self._grow()
        self._data = [value] * len(self._data)

    @abstractmethod
    def _keys(self) -> Iterator:
        """Live handles of the bound graph."""
        pass

    def items(self) -> Iterator[Tuple[Any, V]]:
        """Iterate over ``(handle, value)`` pairs of live items."""
        self._grow()
        for key in self._keys():
            yield key, self._data[key.id]


class NodeMap(DenseMap[V]):
    """Dense map keyed by node."""

    key_type = Node

    def _required_size(self) -> int:
        return self.graph._last_node_id() + 1

    def _keys(self) -> Iterator[Node]:
        return self.graph.nodes()


class EdgeMap(DenseMap[V]):
    """Dense map keyed by edge."""

    key_type = Edge

    def _required_size(self) -> int:
        return self.graph._last_edge_id() + 1

    def _keys(self) -> Iterator[Edge]:
        return self.graph.edges()


class ArcMap(DenseMap[V]):
    """
    Dense map keyed by arc.

    The backward arc of edge ``e`` has id ``e + max_edge_id() + 1``, so it
    moves whenever the maximum edge id grows. The map relocates its
    backward half on growth so each value stays with the same directed
    view of the same edge.
    """

    key_type = Arc

    def __init__(
        self,
        graph: Optional["AdjacencyListGraph"] = None,
        default: V = None,
        default_factory: Optional[Callable[[], V]] = None,
    ):
        self._half = 0
        super().__init__(graph, default, default_factory)

    def attach(self, graph: "AdjacencyListGraph") -> None:
        self._half = 0
        super().attach(graph)

    def detach(self) -> None:
        super().detach()
        self._half = 0

    def _required_size(self) -> int:
        return 2 * (self.graph._last_edge_id() + 1)

    def _grow(self) -> None:
        half = self.graph._last_edge_id() + 1
        if half <= self._half:
            return
        data = self._new_slots(2 * half)
        data[: self._half] = self._data[: self._half]
        data[half : half + self._half] = self._data[self._half :]
        if self._half:
            logger.debug("Relocated backward arcs of %s from %d to %d", self, self._half, half)
        self._data = data
        self._half = half

    def _keys(self) -> Iterator[Arc]:
        return self.graph.arcs()
