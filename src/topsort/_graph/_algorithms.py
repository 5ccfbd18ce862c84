"""Depth-first topological ordering with cycle detection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._ordered_set import OrderedSet

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable, Iterator, Mapping

logger = logging.getLogger(__name__)

CYCLE_ERROR_PREFIX = "cycle error: "
CYCLE_SEPARATOR = " -> "

_EXHAUSTED = object()


class CycleError(ValueError):
    """Raised when a topological sort runs into a cycle.

    Attributes:
        cycle: Keys forming the cycle in traversal order, starting and ending
            with the repeated key (e.g. ``["a", "b", "a"]``).

    """

    def __init__(self, cycle: list[Hashable]) -> None:
        self.cycle = cycle
        super().__init__(cycle)

    def __str__(self) -> str:
        return CYCLE_ERROR_PREFIX + CYCLE_SEPARATOR.join(str(key) for key in self.cycle)


def topological_sort[K: Hashable](
    successors: Mapping[K, Iterable[K]],
    start: K,
    *,
    stable: bool = False,
) -> list[K]:
    """Order the nodes reachable from ``start`` so that edge targets come first.

    The traversal is a depth-first post-order walk: a node is emitted once all
    nodes it has an edge to have been emitted. Keys missing from
    ``successors`` are treated as nodes without edges.

    Args:
        successors: Mapping from node to the nodes it has an edge to.
            An edge (a -> b) means "a depends on b", so b is ordered first.
        start: Key to start the traversal from. Always the last item of the
            result.
        stable: Visit each node's edges in ascending key order, making the
            result reproducible. Keys must then support ``<``.

    Returns:
        Every node reachable from ``start`` (inclusive), each exactly once.

    Raises:
        CycleError: If a cycle is reachable from ``start``.

    Example:
        >>> topological_sort({"a": ["b"], "b": ["c"]}, "a")
        ['c', 'b', 'a']

    """
    logger.debug("Sorting from %r (stable=%s)", start, stable)

    # Nodes on the current descent, in order. Pushed on entry and popped on
    # exit, so only ancestors of the node being expanded are ever present.
    path: OrderedSet[K] = OrderedSet()
    results: OrderedSet[K] = OrderedSet()
    pending: list[Iterator[K]] = []

    def enter(key: K) -> None:
        path.add(key)
        edges: Iterable[K] = successors.get(key, ())
        if stable:
            edges = sorted(edges)  # ty: ignore[invalid-argument-type] # keys are orderable in stable mode
        pending.append(iter(edges))

    enter(start)
    while pending:
        child = next(pending[-1], _EXHAUSTED)
        if child is _EXHAUSTED:
            pending.pop()
            results.add(path.pop())
            continue
        # A finished node's subtree is already in the results and cycle-free
        if child in results:
            continue
        if child in path:
            cycle = [*path.items[path.index(child) :], child]
            logger.debug("Cycle detected: %s", CYCLE_SEPARATOR.join(str(key) for key in cycle))
            raise CycleError(cycle)
        enter(child)  # ty: ignore[invalid-argument-type] # sentinel excluded above

    logger.debug("Sorted %d nodes from %r", len(results), start)
    return list(results)
