"""
Graph event system.

This module lets components subscribe to insertions into a graph. Property
maps use it to grow their storage as soon as new identities appear.
Listeners are held by weak reference so a forgotten map does not stay
alive just because the graph still knows about it.
"""

import logging
import weakref
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Protocol

logger = logging.getLogger(__name__)


class GraphEvent(Enum):
    """Events that can occur in the graph."""

    NODE_ADDED = auto()
    NODES_PADDED = auto()
    EDGE_ADDED = auto()


class GraphEventListener(Protocol):
    """Protocol for objects that listen to graph state changes."""

    def on_state_change(self, event: GraphEvent, details: Dict[str, Any]) -> None:
        """
        Called when the graph state changes.

        Args:
            event (GraphEvent): Type of event that occurred
            details (Dict[str, Any]): Additional information about the event
        """
        ...


@dataclass
class GraphEventManager:
    """
    Manages graph event subscriptions and notifications.

    Attributes:
        _listeners (List[weakref.ref]): Weak references to registered listeners
    """

    _listeners: List[weakref.ref] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self._live_listeners())

    def __deepcopy__(self, memo: Dict[int, Any]) -> "GraphEventManager":
        # Copies of a graph start without subscribers.
        return GraphEventManager()

    def _live_listeners(self) -> List[GraphEventListener]:
        live = []
        alive_refs = []
        for ref in self._listeners:
            listener = ref()
            if listener is not None:
                live.append(listener)
                alive_refs.append(ref)
        self._listeners = alive_refs
        return live

    def add_listener(self, listener: GraphEventListener) -> None:
        """
        Add a listener for graph events.

        Args:
            listener (GraphEventListener): The listener to add
        """
        if listener not in self._live_listeners():
            self._listeners.append(weakref.ref(listener))

    def remove_listener(self, listener: GraphEventListener) -> None:
        """
        Remove a graph event listener.

        Args:
            listener (GraphEventListener): The listener to remove
        """
        self._listeners = [ref for ref in self._listeners if ref() is not listener]

    def notify(self, event: GraphEvent, details: Dict[str, Any]) -> None:
        """
        Notify all listeners of a graph event.

        A failing listener is logged and the remaining listeners are still
        notified.

        Args:
            event (GraphEvent): The type of event that occurred
            details (Dict[str, Any]): Additional information about the event
        """
        for listener in self._live_listeners():
            try:
                listener.on_state_change(event, details)
            except Exception:
                logger.exception("Error notifying listener %r of %s", listener, event.name)

    def clear_listeners(self) -> None:
        """Remove all event listeners."""
        self._listeners.clear()
