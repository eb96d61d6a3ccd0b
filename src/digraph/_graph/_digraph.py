"""Directed, weighted graph data structure."""

from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Self

from digraph._records import GraphRecord, LinkRecord, NodeRecord

DEFAULT_WEIGHT = 1


@dataclass(slots=True)
class Graph[T: Hashable]:
    """A mutable directed graph with optionally weighted edges.

    Nodes are arbitrary hashable identifiers. Each node owns an ordered
    adjacency list of outgoing edge targets; the order is preserved and
    determines traversal order in the algorithms.

    Edge weights are keyed by the ordered pair ``(u, v)``. Only weights that
    differ from the default (1) are stored, so a missing entry always means
    weight 1.

    Adding the same edge twice appends the target twice. Both copies share
    the single weight slot of ``(u, v)``.

    Attributes:
        _edges: Mapping from node to its outgoing edge targets.
        _edge_weights: Mapping from ``(u, v)`` to a non-default weight.

    Example:
        >>> graph = Graph().add_edge("a", "b", 2).add_edge("b", "c")
        >>> graph.all_nodes()
        ['a', 'b', 'c']
        >>> graph.get_edge_weight("a", "b")
        2

    """

    _edges: dict[T, list[T]] = field(default_factory=dict, init=False)
    _edge_weights: dict[tuple[T, T], float] = field(default_factory=dict, init=False)

    @classmethod
    def from_serialized(cls, record: Mapping[str, Any] | GraphRecord) -> Self:
        """Build a graph from a serialized nodes + links record."""
        graph = cls()
        graph.deserialize(record)
        return graph

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[T, T] | tuple[T, T, float]]) -> Self:
        """Build a graph from ``(u, v)`` or ``(u, v, weight)`` tuples.

        Example:
            >>> Graph.from_edges([("a", "b"), ("b", "c", 3)]).serialize()["links"][1]
            {'source': 'b', 'target': 'c', 'weight': 3}

        """
        graph = cls()
        for edge in edges:
            graph.add_edge(*edge)
        return graph

    @property
    def edges(self) -> dict[T, tuple[T, ...]]:
        """A snapshot of the adjacency mapping."""
        return {node: tuple(targets) for node, targets in self._edges.items()}

    @property
    def edge_weights(self) -> dict[tuple[T, T], float]:
        """A snapshot of the explicitly stored (non-default) edge weights."""
        return dict(self._edge_weights)

    # --- Nodes ---------------------------------------------------------------

    def add_node(self, node: T) -> Self:
        """Add a node with no outgoing edges.

        Does nothing if the node already has an adjacency entry.
        """
        self._edges.setdefault(node, [])
        return self

    def remove_node(self, node: T) -> Self:
        """Remove a node together with its incoming and outgoing edges.

        Does nothing if the node is not in the graph.
        """
        for u in list(self._edges):
            if node in self._edges[u]:
                self.remove_edge(u, node)

        for v in self._edges.pop(node, ()):
            self._edge_weights.pop((node, v), None)

        return self

    def all_nodes(self) -> list[T]:
        """Return every node in first-seen order.

        Adjacency keys are walked in insertion order and each key is followed
        by its targets in adjacency order. A node appears at the position it
        was first seen.
        """
        seen: dict[T, None] = {}
        for u, targets in self._edges.items():
            seen.setdefault(u)
            for v in targets:
                seen.setdefault(v)
        return list(seen)

    def adjacent_to(self, node: T) -> tuple[T, ...]:
        """Return the outgoing edge targets of a node, or ``()`` for unknown nodes."""
        return tuple(self._edges.get(node, ()))

    def indegree(self, node: T) -> int:
        """Count the edges pointing into a node.

        This scans every adjacency list, O(E).
        """
        return sum(targets.count(node) for targets in self._edges.values())

    def outdegree(self, node: T) -> int:
        """Count the edges leaving a node."""
        return len(self._edges.get(node, ()))

    # --- Edges ---------------------------------------------------------------

    def set_edge_weight(self, u: T, v: T, weight: float) -> None:
        """Set the weight of the edge ``u -> v``.

        A weight equal to the default is never stored, so calling this with 1
        leaves the stored weights untouched.
        """
        if weight != DEFAULT_WEIGHT:
            self._edge_weights[(u, v)] = weight

    def get_edge_weight(self, u: T, v: T) -> float:
        """Return the weight of ``u -> v``, or 1 if none is stored."""
        return self._edge_weights.get((u, v), DEFAULT_WEIGHT)

    def remove_edge_weight(self, u: T, v: T) -> None:
        """Reset ``u -> v`` to the default weight. The edge itself stays."""
        self._edge_weights.pop((u, v), None)

    def add_edge(self, u: T, v: T, weight: float | None = None) -> Self:
        """Add an edge ``u -> v``, adding either node if it is missing.

        The target is always appended, even when the edge already exists.
        The weight is only touched when one is given.
        """
        self.add_node(u)
        self.add_node(v)
        self._edges[u].append(v)

        if weight is not None:
            self.set_edge_weight(u, v, weight)

        return self

    def remove_edge(self, u: T, v: T) -> Self:
        """Remove every ``u -> v`` edge and its weight.

        Does nothing if ``u`` is unknown. The nodes are kept.
        """
        if u in self._edges:
            self._edges[u] = [target for target in self._edges[u] if target != v]
            self.remove_edge_weight(u, v)

        return self

    def has_edge(self, u: T, v: T) -> bool:
        """Check whether at least one ``u -> v`` edge exists."""
        return v in self._edges.get(u, ())

    # --- Serialization -------------------------------------------------------

    def to_record(self) -> GraphRecord:
        """Convert the graph to a validated ``GraphRecord``."""
        nodes = self.all_nodes()
        return GraphRecord(
            nodes=[NodeRecord(id=node) for node in nodes],
            links=[
                LinkRecord(source=u, target=v, weight=self.get_edge_weight(u, v))
                for u in nodes
                for v in self.adjacent_to(u)
            ],
        )

    def serialize(self) -> dict[str, list[dict[str, Any]]]:
        """Serialize the graph to a plain nodes + links dictionary.

        Nodes follow ``all_nodes()`` order. Links are grouped by source node
        in the same order, then by adjacency order, and always carry the
        ``get_edge_weight`` value unchanged.
        """
        nodes = self.all_nodes()
        return {
            "nodes": [{"id": node} for node in nodes],
            "links": [
                {"source": u, "target": v, "weight": self.get_edge_weight(u, v)}
                for u in nodes
                for v in self.adjacent_to(u)
            ],
        }

    def deserialize(self, record: Mapping[str, Any] | GraphRecord) -> None:
        """Add the nodes and links of a serialized record to this graph.

        All nodes are added first, then every link with its explicit weight.

        Raises:
            pydantic.ValidationError: If the record is malformed. The graph is
                left unchanged in that case.

        """
        validated = GraphRecord.model_validate(record)

        for node in validated.nodes:
            self.add_node(node.id)

        for link in validated.links:
            self.add_edge(link.source, link.target, link.weight)

    def __contains__(self, node: object) -> bool:
        """Check if a node is in the graph, as a key or as an edge target."""
        return node in self._edges or any(node in targets for targets in self._edges.values())

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self.all_nodes())
