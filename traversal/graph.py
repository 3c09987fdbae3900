"""Adjacency graph wrapper.

This module wraps a node -> children mapping so that callers can ask about
children, known nodes and reachability without caring whether a node was
declared as a key or only referenced as someone's child.
"""

from typing import Mapping, Sequence

from models.graph import Node
from parsers.graph_parser import NormalizedGraph
from .dfs import dfs, iter_dfs


class AdjacencyGraph:
    """Directed graph stored as ordered child lists.

    Nodes that only appear as children are leaves. Child order is kept
    as given because it decides traversal order.
    """

    def __init__(self, adjacency: Mapping[Node, Sequence[Node]]):
        """Initialize the graph from an adjacency mapping.

        Args:
            adjacency: Mapping from node to its ordered children.
        """
        self.adjacency: dict[Node, list[Node]] = {
            node: list(children) for node, children in adjacency.items()
        }
        self._nodes: list[Node] = []
        self._node_set: set[Node] = set()
        self._collect_nodes()

    def _collect_nodes(self) -> None:
        """Record every node in first-seen order."""
        for parent, children in self.adjacency.items():
            for node in (parent, *children):
                if node not in self._node_set:
                    self._node_set.add(node)
                    self._nodes.append(node)

    @property
    def nodes(self) -> list[Node]:
        """All nodes, declared or referenced, in first-seen order."""
        return list(self._nodes)

    def get_children(self, node: Node) -> list[Node]:
        """Get the ordered children of a node.

        Args:
            node: The parent node.

        Returns:
            List of children; empty for leaves and unknown nodes.
        """
        return list(self.adjacency.get(node, []))

    def traverse(self, start: Node) -> list[Node]:
        """Return the depth-first visiting order from ``start``."""
        return dfs(self.adjacency, start)

    def reachable_from(self, start: Node) -> set[Node]:
        """Return the set of nodes reachable from ``start``, itself included."""
        return set(iter_dfs(self.adjacency, start))

    def count_with(self, node: Node) -> int:
        """Return the number of distinct nodes once ``node`` is counted too."""
        return len(self._nodes) if node in self._node_set else len(self._nodes) + 1

    def __len__(self) -> int:
        """Return the number of distinct nodes in the graph."""
        return len(self._nodes)

    def __contains__(self, node: Node) -> bool:
        """Check if a node is declared or referenced in the graph."""
        return node in self._node_set


def build_graph(normalized: NormalizedGraph) -> AdjacencyGraph:
    """Build an adjacency graph from parsed input.

    Args:
        normalized: The parsed graph input.

    Returns:
        An AdjacencyGraph instance.
    """
    return AdjacencyGraph(normalized.adjacency)
