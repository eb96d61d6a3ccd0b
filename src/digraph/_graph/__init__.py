"""Graph module providing the weighted digraph and its algorithms.

This module contains:
- Graph[T]: A generic, mutable directed graph with edge weights
- depth_first_search / topological_sort: Finish-order traversals
- dijkstra: Single-pair shortest path with an optional node filter
"""

from ._algorithms import ShortestPath, depth_first_search, dijkstra, topological_sort
from ._digraph import DEFAULT_WEIGHT, Graph

__all__ = [
    "DEFAULT_WEIGHT",
    "Graph",
    "ShortestPath",
    "depth_first_search",
    "dijkstra",
    "topological_sort",
]
