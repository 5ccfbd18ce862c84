"""Topological ordering of directed graphs."""

__all__ = [
    "CycleError",
    "Graph",
    "GraphFileError",
    "OrderedSet",
    "load_graph",
    "topological_sort",
]

from ._graph import CycleError, Graph, OrderedSet, topological_sort
from ._io import GraphFileError, load_graph
