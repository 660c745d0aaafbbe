"""Graph algorithms built on the consumer protocol."""

from .shortest_path import NegativeWeightError, PathResult, ShortestPathFinder

__all__ = ["NegativeWeightError", "PathResult", "ShortestPathFinder"]
