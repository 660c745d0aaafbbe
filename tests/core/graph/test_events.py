"""
Tests for graph insertion events.
"""

import gc
import logging

from adjgraph.core.graph import GraphEvent, GraphEventManager


class RecordingListener:
    """Listener collecting every event it receives."""

    def __init__(self):
        self.events = []

    def on_state_change(self, event, details):
        self.events.append((event, details))


class FailingListener:
    """Listener raising on every event."""

    def on_state_change(self, event, details):
        raise RuntimeError("listener failure")


def test_node_events(graph):
    """Test events emitted by node insertion."""
    listener = RecordingListener()
    graph.add_listener(listener)

    graph.add_node()
    graph.add_node(4)
    graph.add_node(2)
    graph.add_node(2)

    assert listener.events == [
        (GraphEvent.NODE_ADDED, {"node_id": 0}),
        (GraphEvent.NODES_PADDED, {"start": 1, "count": 3}),
        (GraphEvent.NODE_ADDED, {"node_id": 4}),
        (GraphEvent.NODE_ADDED, {"node_id": 2}),
    ]


def test_edge_events(graph):
    """Test events emitted by edge insertion."""
    listener = RecordingListener()
    graph.add_node()
    graph.add_node()
    graph.add_listener(listener)

    graph.add_edge(0, 1)
    graph.add_edge(1, 0)

    assert listener.events == [(GraphEvent.EDGE_ADDED, {"edge_id": 0, "u": 0, "v": 1})]


def test_remove_listener(graph):
    """Test that removed listeners are no longer notified."""
    listener = RecordingListener()
    graph.add_listener(listener)
    graph.remove_listener(listener)

    graph.add_node()

    assert listener.events == []


def test_listener_registered_once():
    """Test that adding a listener twice notifies it once."""
    manager = GraphEventManager()
    listener = RecordingListener()
    manager.add_listener(listener)
    manager.add_listener(listener)

    manager.notify(GraphEvent.NODE_ADDED, {"node_id": 0})

    assert len(manager) == 1
    assert len(listener.events) == 1


def test_failing_listener_does_not_stop_others(caplog):
    """Test that a failing listener is logged and others still run."""
    manager = GraphEventManager()
    failing = FailingListener()
    listener = RecordingListener()
    manager.add_listener(failing)
    manager.add_listener(listener)

    with caplog.at_level(logging.ERROR, logger="adjgraph.core.graph.events"):
        manager.notify(GraphEvent.NODE_ADDED, {"node_id": 0})

    assert len(listener.events) == 1
    assert "Error notifying listener" in caplog.text


def test_listeners_are_weakly_referenced():
    """Test that the manager does not keep listeners alive."""
    manager = GraphEventManager()
    listener = RecordingListener()
    manager.add_listener(listener)
    assert len(manager) == 1

    del listener
    gc.collect()

    assert len(manager) == 0
    manager.notify(GraphEvent.NODE_ADDED, {"node_id": 0})


def test_clear_listeners():
    """Test removing every listener at once."""
    manager = GraphEventManager()
    listener = RecordingListener()
    manager.add_listener(listener)
    manager.clear_listeners()

    manager.notify(GraphEvent.NODE_ADDED, {"node_id": 0})

    assert listener.events == []
