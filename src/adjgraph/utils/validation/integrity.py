"""
Structural integrity validation for adjacency list graphs.

The container keeps its live counts, maximum ids and incidence records in
step with slot storage on every insert. A miscounted tombstone corrupts
every consumer silently, so this module re-derives all of that
bookkeeping from storage and reports each disagreement.
"""

import logging
from typing import List

from ...core.exceptions import ValidationError
from ...core.graph.base import AdjacencyListGraph
from .base import ValidationResult

logger = logging.getLogger(__name__)


class GraphIntegrityValidator:
    """
    Validator for the bookkeeping of an ``AdjacencyListGraph``.

    All checks are static methods returning lists of error messages so
    they can be run one by one in tests.
    """

    @staticmethod
    def _validate_counts(graph: AdjacencyListGraph) -> List[str]:
        """
        Validate live counts against slot storage.

        Args:
            graph: Graph to validate

        Returns:
            List[str]: List of validation error messages
        """
        errors = []
        live_nodes = sum(1 for slot in graph._nodes if not slot.is_tombstone)
        live_edges = sum(1 for slot in graph._edges if not slot.is_tombstone)
        if live_nodes != graph.node_num():
            errors.append(f"node_num() is {graph.node_num()} but {live_nodes} slots are live")
        if live_edges != graph.edge_num():
            errors.append(f"edge_num() is {graph.edge_num()} but {live_edges} slots are live")
        if graph.arc_num() != 2 * graph.edge_num():
            errors.append(f"arc_num() is {graph.arc_num()}, expected {2 * graph.edge_num()}")
        return errors

    @staticmethod
    def _validate_iteration(graph: AdjacencyListGraph) -> List[str]:
        """
        Validate that iteration reaches every live node and edge.

        On a one-based graph slot 0 lies outside the iteration range and
        must stay a placeholder.

        Args:
            graph: Graph to validate

        Returns:
            List[str]: List of validation error messages
        """
        errors = []
        iterated_nodes = sum(1 for _ in graph.nodes())
        iterated_edges = sum(1 for _ in graph.edges())
        if iterated_nodes != graph.node_num():
            errors.append(
                f"Iteration yields {iterated_nodes} nodes but node_num() is {graph.node_num()}"
            )
        if iterated_edges != graph.edge_num():
            errors.append(
                f"Iteration yields {iterated_edges} edges but edge_num() is {graph.edge_num()}"
            )
        return errors

    @staticmethod
    def _validate_slot_ids(graph: AdjacencyListGraph) -> List[str]:
        """
        Validate that every live slot stores its own index.

        Args:
            graph: Graph to validate

        Returns:
            List[str]: List of validation error messages
        """
        errors = []
        for index, slot in enumerate(graph._nodes):
            if not slot.is_tombstone and slot.id != index:
                errors.append(f"Node slot {index} stores id {slot.id}")
        for index, slot in enumerate(graph._edges):
            if not slot.is_tombstone and slot.id != index:
                errors.append(f"Edge slot {index} stores id {slot.id}")
        return errors

    @staticmethod
    def _validate_edges(graph: AdjacencyListGraph) -> List[str]:
        """
        Validate edge endpoints and their incidence records.

        Every live edge must connect two distinct live nodes, and both
        endpoints must list the edge under the other endpoint.

        Args:
            graph: Graph to validate

        Returns:
            List[str]: List of validation error messages
        """
        errors = []
        for slot in graph._edges:
            if slot.is_tombstone:
                continue
            if slot.u == slot.v:
                errors.append(f"Edge {slot.id} is a self-loop on node {slot.u}")
                continue
            for own, other in ((slot.u, slot.v), (slot.v, slot.u)):
                if not graph.node_from_id(own).is_valid:
                    errors.append(f"Edge {slot.id} references non-live node {own}")
                    continue
                if graph._nodes[own].find_edge(other) != slot.id:
                    errors.append(
                        f"Incidence record of node {own} does not map {other} to edge {slot.id}"
                    )
        return errors

    @staticmethod
    def _validate_incidence(graph: AdjacencyListGraph) -> List[str]:
        """
        Validate that incidence records only reference matching live edges.

        Args:
            graph: Graph to validate

        Returns:
            List[str]: List of validation error messages
        """
        errors = []
        for slot in graph._nodes:
            if slot.is_tombstone:
                if len(slot):
                    errors.append("A tombstoned node slot has incident edges")
                continue
            for adjacency in slot:
                if not graph.edge_from_id(adjacency.edge_id).is_valid:
                    errors.append(
                        f"Node {slot.id} lists non-live edge {adjacency.edge_id}"
                    )
                    continue
                endpoints = {graph._edges[adjacency.edge_id].u, graph._edges[adjacency.edge_id].v}
                if endpoints != {slot.id, adjacency.node_id}:
                    errors.append(
                        f"Node {slot.id} lists edge {adjacency.edge_id} towards "
                        f"{adjacency.node_id}, but the edge connects {sorted(endpoints)}"
                    )
        return errors

    @staticmethod
    def _validate_max_ids(graph: AdjacencyListGraph) -> List[str]:
        """
        Validate that maximum ids agree with the last storage slots.

        Args:
            graph: Graph to validate

        Returns:
            List[str]: List of validation error messages
        """
        errors = []
        if graph._nodes and graph.max_node_id() not in (len(graph._nodes) - 1, -1):
            errors.append(f"max_node_id() is {graph.max_node_id()} for {len(graph._nodes)} slots")
        if graph._edges and graph.max_edge_id() not in (len(graph._edges) - 1, -1):
            errors.append(f"max_edge_id() is {graph.max_edge_id()} for {len(graph._edges)} slots")
        return errors

    @classmethod
    def validate(cls, graph: AdjacencyListGraph) -> ValidationResult:
        """
        Run every integrity check against a graph.

        Args:
            graph: Graph to validate

        Returns:
            ValidationResult containing validation details and any errors
        """
        errors = []
        errors.extend(cls._validate_counts(graph))
        errors.extend(cls._validate_iteration(graph))
        errors.extend(cls._validate_slot_ids(graph))
        errors.extend(cls._validate_edges(graph))
        errors.extend(cls._validate_incidence(graph))
        errors.extend(cls._validate_max_ids(graph))

        warnings = []
        tombstones = len(graph._nodes) - graph.node_num()
        if tombstones > graph.node_num():
            warnings.append(f"Node storage holds more tombstones ({tombstones}) than live nodes")

        if errors:
            logger.debug("Graph integrity check found %d errors", len(errors))
        return ValidationResult.from_errors(
            errors,
            warnings,
            context={"node_num": graph.node_num(), "edge_num": graph.edge_num()},
        )

    @classmethod
    def validate_or_raise(cls, graph: AdjacencyListGraph) -> None:
        """
        Validate a graph and raise on the first failure.

        Raises:
            ValidationError: If any integrity check fails
        """
        result = cls.validate(graph)
        if not result.is_valid:
            raise ValidationError("; ".join(result.errors))
