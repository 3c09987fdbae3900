"""Depth-first traversal over adjacency mappings.

Nodes are discovered in the order their parents list them, but the stack is
consumed from the top, so the subtree under the last-listed child is expanded
before its earlier siblings. For ``{1: [2, 3], 2: [4, 5], 3: [6]}`` starting
at ``1`` the order is ``[1, 2, 3, 6, 4, 5]``.
"""

from typing import Generator, Hashable, Mapping, Sequence, TypeVar

Node = TypeVar("Node", bound=Hashable)


def iter_dfs(
    graph: Mapping[Node, Sequence[Node]],
    start: Node,
) -> Generator[Node, None, None]:
    """Yield nodes reachable from ``start`` in depth-first order.

    A node is yielded the first time it is discovered and never again.
    ``start`` does not have to be a key of ``graph``; nodes missing from
    the mapping are treated as leaves.

    Args:
        graph: Mapping from node to its ordered children.
        start: The node to begin from.

    Yields:
        Each reachable node exactly once, starting with ``start``.
    """
    visited: set[Node] = {start}
    stack: list[Node] = [start]
    yield start

    while stack:
        node = stack.pop()
        for child in graph.get(node, ()):
            if child in visited:
                continue
            visited.add(child)
            yield child
            stack.append(child)


def dfs(graph: Mapping[Node, Sequence[Node]], start: Node) -> list[Node]:
    """Return the depth-first visiting order from ``start``.

    Args:
        graph: Mapping from node to its ordered children.
        start: The node to begin from.

    Returns:
        List of reachable nodes, each appearing once, ``start`` first.
    """
    return list(iter_dfs(graph, start))
