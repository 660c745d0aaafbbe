"""
Custom exceptions for the adjacency list graph.

Ordinary absence never raises: lookups answer with the invalid sentinel
handle. The exceptions below cover contract violations, configuration
problems and the consumer-facing layers built on top of the container.
"""


class ValidationError(Exception):
    """
    Raised when graph validation fails.

    Examples:
        * Live counts disagree with storage
        * Asymmetric incidence records
        * Edge endpoints referencing tombstoned nodes
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class GraphOperationError(Exception):
    """
    Raised when a graph operation violates its contract.

    Examples:
        * Querying the maximum id of empty storage
        * Dereferencing an exhausted iterator
        * Requesting a negative node id
        * Using a property map that is not bound to a graph
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Unknown configuration keys
        * Values of the wrong type
        * Negative thresholds
    """


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    The core container never raises this; consumers that cannot proceed
    without an entity (path finding, strict validation) do.
    """


class NodeNotFoundError(ResourceNotFoundError):
    """Raised when a consumer requires a node that is not live."""


class EdgeNotFoundError(ResourceNotFoundError):
    """Raised when a consumer requires an edge that is not live."""
