"""Traversal and shortest-path algorithms over ``Graph``.

Algorithms only read the graph. Each call keeps its working state (visited
sets, distances, candidates) local to that call.
"""

import logging
import math
from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass

from digraph._errors import NodeNotFoundError, PathNotFoundError

from ._digraph import Graph

logger = logging.getLogger(__name__)

# Returned by _extract_min instead of a node; None is a valid node id.
_UNREACHABLE = object()


@dataclass(frozen=True, slots=True)
class ShortestPath[T: Hashable]:
    """Result of a single-pair shortest path search.

    Attributes:
        path: Nodes from source to destination, both included.
        distance: Sum of the edge weights along ``path``.

    """

    path: list[T]
    distance: float


def depth_first_search[T: Hashable](
    graph: Graph[T],
    source_nodes: Iterable[T] | None = None,
    *,
    include_source_nodes: bool = True,
) -> list[T]:
    """Return nodes in depth-first finish order (post-order).

    A node is emitted only after every node reachable from it has been
    emitted. Children are visited in adjacency order and source nodes in the
    order given, so the result is deterministic for a given graph.

    Args:
        graph: The graph to traverse.
        source_nodes: Nodes to start from. Defaults to ``graph.all_nodes()``.
        include_source_nodes: If False, source nodes are marked visited but
            never emitted. Their descendants are still traversed.

    Returns:
        List of visited nodes in finish order.

    Example:
        >>> graph = Graph.from_edges([("a", "b"), ("b", "c")])
        >>> depth_first_search(graph)
        ['c', 'b', 'a']
        >>> depth_first_search(graph, ["b"], include_source_nodes=False)
        ['c']

    """
    if source_nodes is None:
        source_nodes = graph.all_nodes()

    visited: set[T] = set()
    order: list[T] = []

    def visit(start: T) -> None:
        if start in visited:
            return
        visited.add(start)
        stack = [(start, iter(graph.adjacent_to(start)))]
        while stack:
            node, children = stack[-1]
            for child in children:
                if child not in visited:
                    visited.add(child)
                    stack.append((child, iter(graph.adjacent_to(child))))
                    break
            else:
                stack.pop()
                order.append(node)

    for source in source_nodes:
        if include_source_nodes:
            visit(source)
        else:
            visited.add(source)
            for child in graph.adjacent_to(source):
                visit(child)

    return order


def topological_sort[T: Hashable](
    graph: Graph[T],
    source_nodes: Iterable[T] | None = None,
    *,
    include_source_nodes: bool = True,
) -> list[T]:
    """Sort the visited nodes so that every edge ``u -> v`` has ``u`` before ``v``.

    This is ``depth_first_search`` reversed. The ordering only holds when the
    visited part of the graph is acyclic; cycles are not detected.

    Example:
        >>> graph = Graph.from_edges([("a", "b"), ("b", "c"), ("a", "c")])
        >>> topological_sort(graph)
        ['a', 'b', 'c']

    """
    order = depth_first_search(graph, source_nodes, include_source_nodes=include_source_nodes)
    order.reverse()
    return order


def dijkstra[T: Hashable](
    graph: Graph[T],
    source: T,
    destination: T,
    node_filter: Callable[[T], bool] | None = None,
) -> ShortestPath[T]:
    """Find the shortest path from ``source`` to ``destination``.

    The minimum-distance candidate is found by a linear scan, O(V^2) overall.
    Ties go to the candidate that comes first in ``graph.all_nodes()``.
    Negative weights are accepted but not checked for cycles.

    Args:
        graph: The graph to search.
        source: Start node.
        destination: End node.
        node_filter: Predicate selecting which nodes may be extracted as
            candidates. Nodes it rejects are never expanded. Defaults to
            accepting every node.

    Returns:
        The path and its total weight.

    Raises:
        NodeNotFoundError: If source or destination is not in the graph.
        PathNotFoundError: If destination cannot be reached from source.

    """
    # Upper bounds on shortest path weights from source.
    dist: dict[T, float] = dict.fromkeys(graph.all_nodes(), math.inf)
    prev: dict[T, T] = {}

    if source not in dist:
        raise NodeNotFoundError(source, "source")
    if destination not in dist:
        raise NodeNotFoundError(destination, "destination")

    dist[source] = 0

    candidates: dict[T, None] = dict.fromkeys(
        node for node in dist if node_filter is None or node_filter(node)
    )
    logger.debug(f"Shortest path {source!r} -> {destination!r} over {len(candidates)} candidates")

    while candidates:
        u = _extract_min(candidates, dist)
        if u is _UNREACHABLE:
            # Every remaining candidate is unreachable from source.
            logger.debug(f"Dropping {len(candidates)} unreachable candidates")
            candidates.clear()
            break

        for v in graph.adjacent_to(u):
            alt = dist[u] + graph.get_edge_weight(u, v)
            if alt < dist[v]:
                dist[v] = alt
                prev[v] = u

    return _assemble_path(graph, prev, source, destination)


def _extract_min[T: Hashable](candidates: dict[T, None], dist: dict[T, float]) -> T | object:
    """Remove and return the finite-distance candidate closest to the source.

    Returns ``_UNREACHABLE`` when every remaining candidate is at infinity.
    """
    best: T | object = _UNREACHABLE
    best_dist = math.inf
    for node in candidates:
        if dist[node] < best_dist:
            best, best_dist = node, dist[node]

    if best is _UNREACHABLE:
        return _UNREACHABLE

    del candidates[best]
    return best


def _assemble_path[T: Hashable](
    graph: Graph[T],
    prev: dict[T, T],
    source: T,
    destination: T,
) -> ShortestPath[T]:
    """Walk predecessors back from destination to source."""
    path = [destination]
    distance: float = 0
    node = destination

    while node != source and node in prev:
        parent = prev[node]
        distance += graph.get_edge_weight(parent, node)
        node = parent
        if node in path:
            # Predecessor cycle, only possible with negative weights.
            break
        path.append(node)

    if node != source:
        raise PathNotFoundError(source, destination)

    path.reverse()
    logger.debug(f"Shortest path {path} with distance {distance}")
    return ShortestPath(path=path, distance=distance)
