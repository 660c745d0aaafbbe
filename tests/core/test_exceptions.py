"""
Tests for custom exceptions.
"""

import pytest

from adjgraph.core.exceptions import (
    ConfigurationError,
    EdgeNotFoundError,
    GraphOperationError,
    NodeNotFoundError,
    ResourceNotFoundError,
    ValidationError,
)


def test_validation_error_message():
    """Test validation error message formatting."""
    error = ValidationError("test message")
    assert str(error) == "Validation Error: test message"


def test_graph_operation_error_message():
    """Test graph operation error message formatting."""
    error = GraphOperationError("test message")
    assert str(error) == "Graph Operation Error: test message"


def test_configuration_error_message():
    """Test that configuration errors keep their plain message."""
    assert str(ConfigurationError("bad value")) == "bad value"


@pytest.mark.parametrize("error_class", [NodeNotFoundError, EdgeNotFoundError])
def test_not_found_hierarchy(error_class):
    """Test that specific not-found errors share a base class."""
    with pytest.raises(ResourceNotFoundError):
        raise error_class("missing")
