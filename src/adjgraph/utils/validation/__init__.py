"""
Validation package for adjgraph.

This package provides integrity checks for the bookkeeping of adjacency
list graphs.
"""

from .base import ValidationResult
from .integrity import GraphIntegrityValidator

__all__ = [
    "ValidationResult",
    "GraphIntegrityValidator",
]
