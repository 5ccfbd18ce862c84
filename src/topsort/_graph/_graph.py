"""Mutable directed graph with topological sort entry points."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._algorithms import topological_sort
from ._ordered_set import OrderedSet

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable


class Graph[K: Hashable]:
    """A directed graph of keyed nodes.

    The key is the node: no payload is stored. An edge (a -> b) means
    "a depends on b", so sorting places b before a.

    Each node keeps its outgoing edges in an ``OrderedSet``, which makes
    repeated edge insertions idempotent and keeps enumeration in insertion
    order.

    The graph is not safe for concurrent mutation while a sort is running.

    Example:
        >>> graph = Graph()
        >>> graph.add_edge("app", "lib")
        >>> graph.add_edge("lib", "utils")
        >>> graph.top_sort("app")
        ['utils', 'lib', 'app']

    """

    __slots__ = ("_nodes",)

    def __init__(self) -> None:
        self._nodes: dict[K, OrderedSet[K]] = {}

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[K, K]], nodes: Iterable[K] = ()) -> Graph[K]:
        """Build a graph from (from, to) edge pairs and optional extra nodes.

        Example:
            >>> Graph.from_edges([("a", "b")], nodes=["c"]).nodes
            ('c', 'a', 'b')

        """
        graph: Graph[K] = cls()
        for node in nodes:
            graph.add_node(node)
        for from_key, to_key in edges:
            graph.add_edge(from_key, to_key)
        return graph

    def _get_or_add_node(self, key: K) -> OrderedSet[K]:
        edges = self._nodes.get(key)
        if edges is None:
            edges = self._nodes[key] = OrderedSet()
        return edges

    def add_node(self, key: K) -> None:
        """Ensure ``key`` exists in the graph. No-op if it already does."""
        self._get_or_add_node(key)

    def add_edge(self, from_key: K, to_key: K) -> None:
        """Record a directed edge, creating either endpoint if missing.

        Adding the same edge twice leaves the graph unchanged.
        """
        edges = self._get_or_add_node(from_key)
        self.add_node(to_key)
        edges.add(to_key)

    def contains_node(self, key: K) -> bool:
        return key in self._nodes

    @property
    def nodes(self) -> tuple[K, ...]:
        """All node keys in insertion order."""
        return tuple(self._nodes)

    def successors(self, key: K) -> tuple[K, ...]:
        """Direct edge targets of a node, in insertion order.

        Returns an empty tuple for keys not in the graph.
        """
        edges = self._nodes.get(key)
        return edges.items if edges is not None else ()

    def top_sort(self, start_key: K) -> list[K]:
        """Return the nodes reachable from ``start_key`` with dependencies first.

        Only the dependency constraints are guaranteed; the relative order of
        independent subtrees is unspecified.

        A ``start_key`` that is not in the graph is treated as a node without
        edges, so the result is ``[start_key]``.

        Raises:
            CycleError: If a cycle is reachable from ``start_key``.

        """
        return topological_sort(self._nodes, start_key)

    def stable_top_sort(self, start_key: K) -> list[K]:
        """Like ``top_sort``, but visit each node's edges in ascending key order.

        The result is identical across calls on an unchanged graph.

        Raises:
            CycleError: If a cycle is reachable from ``start_key``.

        """
        return topological_sort(self._nodes, start_key, stable=True)

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._nodes)

    def __repr__(self) -> str:
        edge_count = sum(len(edges) for edges in self._nodes.values())
        return f"{type(self).__name__}(nodes={len(self._nodes)}, edges={edge_count})"
