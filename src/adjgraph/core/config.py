"""
Configuration for the adjacency list graph.

Configuration can be built directly or loaded from a plain mapping (for
example a parsed JSON or TOML section). Mappings are checked against a
JSON schema before they are turned into a ``GraphConfig``.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate

from .exceptions import ConfigurationError

GRAPH_CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "zero_start": {"type": "boolean"},
        "padding_warning_threshold": {"type": "integer", "minimum": 0},
    },
    "additionalProperties": False,
}


@dataclass(frozen=True)
class GraphConfig:
    """
    Settings of an ``AdjacencyListGraph``.

    Attributes:
        zero_start (bool): Whether identities start at 0. When False, slot 0
            of node and edge storage is a permanent placeholder and the
            first sequential id is 1.
        padding_warning_threshold (int): Number of tombstones a single
            explicit-id insert may create before a warning is logged.
    """

    zero_start: bool = True
    padding_warning_threshold: int = 1_000_000

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.padding_warning_threshold < 0:
            raise ConfigurationError("padding_warning_threshold must be non-negative")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GraphConfig":
        """
        Build a configuration from a mapping.

        Args:
            data (Mapping[str, Any]): Configuration values; missing keys keep
                their defaults

        Returns:
            GraphConfig: The validated configuration

        Raises:
            ConfigurationError: If the mapping does not match the schema
        """
        try:
            validate(instance=dict(data), schema=GRAPH_CONFIG_SCHEMA)
        except JsonSchemaError as e:
            raise ConfigurationError(f"Invalid graph configuration: {e.message}") from e
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the configuration to a plain dictionary."""
        return asdict(self)
