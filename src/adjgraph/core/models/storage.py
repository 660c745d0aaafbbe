"""
Slot storage for nodes and edges.

Both node and edge storage are append-only lists indexed by identity. A
slot whose stored id is ``INVALID_ID`` is a tombstone: reserved by a
gap-filling insert but not yet claimed by a live entity.
"""

from bisect import bisect_left
from typing import Iterator, List, NamedTuple, Optional

from .handles import INVALID_ID


class Adjacency(NamedTuple):
    """One incidence record entry: a neighbor and the connecting edge."""

    node_id: int
    edge_id: int


class NodeStorage:
    """
    Storage slot of a node and its incidence record.

    The incidence record is kept sorted by neighbor id so that edge lookup
    between two nodes is a binary search over the smaller side.

    Attributes:
        id (int): Node identity, or ``INVALID_ID`` for a tombstone
    """

    __slots__ = ("id", "_adjacencies", "_neighbor_ids")

    def __init__(self, node_id: int = INVALID_ID):
        self.id = node_id
        self._adjacencies: List[Adjacency] = []
        self._neighbor_ids: List[int] = []

    def __repr__(self) -> str:
        return f"NodeStorage(id={self.id}, degree={len(self._adjacencies)})"

    def __iter__(self) -> Iterator[Adjacency]:
        return iter(self._adjacencies)

    def __len__(self) -> int:
        return len(self._adjacencies)

    @property
    def is_tombstone(self) -> bool:
        return self.id == INVALID_ID

    @property
    def adjacencies(self) -> List[Adjacency]:
        """Incidence record entries in ascending neighbor order."""
        return self._adjacencies

    def insert(self, node_id: int, edge_id: int) -> None:
        """
        Register the edge leading to ``node_id``.

        Re-inserting a known neighbor keeps the existing record.

        Args:
            node_id (int): Neighbor identity
            edge_id (int): Identity of the connecting edge
        """
        pos = bisect_left(self._neighbor_ids, node_id)
        if pos < len(self._neighbor_ids) and self._neighbor_ids[pos] == node_id:
            return
        self._neighbor_ids.insert(pos, node_id)
        self._adjacencies.insert(pos, Adjacency(node_id, edge_id))

    def find_edge(self, node_id: int) -> Optional[int]:
        """
        Look up the edge leading to ``node_id``.

        Args:
            node_id (int): Neighbor identity

        Returns:
            Optional[int]: The edge id if the neighbor is known, None otherwise
        """
        pos = bisect_left(self._neighbor_ids, node_id)
        if pos < len(self._neighbor_ids) and self._neighbor_ids[pos] == node_id:
            return self._adjacencies[pos].edge_id
        return None

    def number_of_edges(self) -> int:
        return len(self._adjacencies)


class EdgeStorage(NamedTuple):
    """Storage slot of an edge: both endpoints in insertion order and the edge id."""

    u: int = INVALID_ID
    v: int = INVALID_ID
    id: int = INVALID_ID

    @property
    def is_tombstone(self) -> bool:
        return self.id == INVALID_ID
