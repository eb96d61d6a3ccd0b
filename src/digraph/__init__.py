"""In-memory directed, weighted graphs with DFS, topological sort and Dijkstra."""

__all__ = [
    "DEFAULT_WEIGHT",
    "Graph",
    "GraphError",
    "GraphFormatError",
    "GraphRecord",
    "LinkRecord",
    "NodeNotFoundError",
    "NodeRecord",
    "PathNotFoundError",
    "ShortestPath",
    "depth_first_search",
    "dijkstra",
    "dump_graph",
    "load_graph",
    "load_record",
    "topological_sort",
]

from ._errors import GraphError, GraphFormatError, NodeNotFoundError, PathNotFoundError
from ._graph import DEFAULT_WEIGHT, Graph, ShortestPath, depth_first_search, dijkstra, topological_sort
from ._io import dump_graph, load_graph, load_record
from ._records import GraphRecord, LinkRecord, NodeRecord
