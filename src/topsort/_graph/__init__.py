"""Graph module providing topological ordering.

This module contains:
- Graph[K]: A generic, mutable directed graph with sort entry points
- OrderedSet[T]: Insertion-ordered set used for edges, paths and results
- topological_sort: Depth-first post-order traversal with cycle detection
- CycleError: Raised when a cycle is reachable from the start key
"""

from ._algorithms import CycleError, topological_sort
from ._graph import Graph
from ._ordered_set import OrderedSet

__all__ = ["CycleError", "Graph", "OrderedSet", "topological_sort"]
