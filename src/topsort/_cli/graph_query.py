"""Graph query functions for CLI commands.

This module provides pure functions for querying a graph.
These are the functional core - no I/O, no Rich rendering.
"""

from __future__ import annotations

from dataclasses import dataclass

from topsort._graph import Graph


@dataclass(frozen=True, slots=True)
class SortResult:
    """Outcome of a topological sort started from one node."""

    start: str
    order: list[str]
    stable: bool


@dataclass(slots=True)
class TreeNode:
    """A node in a dependency tree for rendering."""

    key: str
    children: list[TreeNode]


def _require_node(graph: Graph[str], key: str) -> None:
    if key not in graph:
        msg = f"Node not found: {key}"
        raise KeyError(msg)


def sort_from(graph: Graph[str], start: str, *, stable: bool = False) -> SortResult:
    """Sort the part of the graph reachable from a node.

    Args:
        graph: The graph to sort.
        start: The node to start from.
        stable: Use the deterministic, key-ordered edge traversal.

    Returns:
        SortResult with dependencies ordered before dependents.

    Raises:
        KeyError: If the node is not found.
        CycleError: If a cycle is reachable from the node.

    """
    _require_node(graph, start)
    order = graph.stable_top_sort(start) if stable else graph.top_sort(start)
    return SortResult(start=start, order=order, stable=stable)


def get_dependency_tree(
    graph: Graph[str],
    start: str,
    *,
    max_depth: int | None = None,
) -> TreeNode:
    """Build a dependency tree for visualization.

    Children are listed in key order and every node is expanded at most once.

    Args:
        graph: The graph containing the node.
        start: The root node of the tree.
        max_depth: Maximum depth to traverse (None for unlimited).

    Returns:
        TreeNode representing the dependency tree.

    Raises:
        KeyError: If the node is not found.
        CycleError: If a cycle is reachable from the node.

    """
    _require_node(graph, start)
    # Reject cycles up front so the tree below is finite
    graph.stable_top_sort(start)

    def build_tree(key: str, depth: int, visited: set[str]) -> TreeNode:
        children: list[TreeNode] = []

        if max_depth is not None and depth >= max_depth:
            return TreeNode(key=key, children=children)

        for child in sorted(graph.successors(key)):
            if child not in visited:
                visited.add(child)
                children.append(build_tree(child, depth + 1, visited))

        return TreeNode(key=key, children=children)

    return build_tree(start, 0, {start})
