"""Depth-first traversal of directed graphs."""

from .dfs import dfs, iter_dfs
from .graph import AdjacencyGraph, build_graph

__all__ = [
    "dfs",
    "iter_dfs",
    "AdjacencyGraph",
    "build_graph",
]
