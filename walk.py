"""
Depth-first graph walker

Example usage:
    from walk import walk

    # With an adjacency mapping
    walk({"graph": {1: [2, 3], 2: [4, 5], 3: [6]}, "start": 1})
    # -> [1, 2, 3, 6, 4, 5]

    # With a plain text edge listing
    walk("a -> b, c\\nb -> d")
    # -> ["a", "b", "c", "d"]
"""

from typing import Optional, Union

from models.graph import Node
from parsers.graph_parser import parse_input, coerce_node
from traversal.graph import build_graph


def walk(input: Union[str, dict], start: Optional[Node] = None) -> list[Node]:
    """
    Traverse a graph depth-first and return the visiting order.

    Args:
        input: Graph description. Can be:
            - dict: adjacency under "graph", edge list under "edges", or a bare adjacency
            - str: Either a JSON string or a plain text edge listing
        start: Node to start from. Defaults to the start given in the input,
            or the first node listed.

    Returns:
        Nodes reachable from the start node, each once, in depth-first order.
        Empty if the input holds no nodes and no start is given.

    Raises:
        ValueError: If the input cannot be parsed as a graph
    """
    normalized = parse_input(input)
    if start is None:
        start = normalized.start
    else:
        start = coerce_node(start)

    if start is None:
        return []

    return build_graph(normalized).traverse(start)


# For convenience, allow running as a script
if __name__ == "__main__":
    import json
    import sys

    if len(sys.argv) > 1:
        with open(sys.argv[1]) as f:
            source = f.read()
    else:
        source = sys.stdin.read()

    print(json.dumps(walk(source)))
