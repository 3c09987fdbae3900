"""Input parser for normalizing various graph formats."""

import json
import re
from typing import Any, Optional, Union
from dataclasses import dataclass, field

from models.graph import Node


@dataclass
class NormalizedGraph:
    """Unified adjacency representation for traversal input."""

    raw_input: Union[str, dict]
    adjacency: dict[Node, list[Node]] = field(default_factory=dict)
    start: Optional[Node] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        """Check if no nodes were found."""
        return not self.adjacency and self.start is None


ADJACENCY_KEYS = ["graph", "adjacency", "tree", "children"]
EDGE_KEYS = ["edges", "links"]
START_KEYS = ["start", "root", "source"]

_INT_PATTERN = re.compile(r"^-?\d+$")
_TEXT_SEPARATORS = ("->", ":")


def parse_input(input_data: Union[str, dict]) -> NormalizedGraph:
    """
    Parse and normalize a graph from various formats.

    Supports:
    - JSON dict (already parsed), holding an adjacency or an edge list
    - JSON string
    - Plain text, one ``parent -> child, child`` or ``parent: child child`` per line

    Args:
        input_data: The input to parse (dict, JSON string, or plain text)

    Returns:
        NormalizedGraph with the adjacency and start node

    Raises:
        ValueError: If the input type is unsupported or the graph is malformed
    """
    if isinstance(input_data, dict):
        return _parse_dict(input_data)

    if isinstance(input_data, str):
        # Try to parse as JSON first
        try:
            parsed = json.loads(input_data)
            if isinstance(parsed, dict):
                return _parse_dict(parsed)
        except json.JSONDecodeError:
            pass

        return _parse_text(input_data)

    raise ValueError(f"Unsupported input type: {type(input_data)}")


def coerce_node(value: Any) -> Node:
    """Convert a raw identifier to a node, turning integer strings into ints."""
    if isinstance(value, bool):
        raise ValueError(f"Invalid node identifier: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise ValueError("Node identifier cannot be empty")
        if _INT_PATTERN.match(value):
            return int(value)
        return value
    raise ValueError(f"Invalid node identifier: {value!r}")


def _parse_dict(data: dict) -> NormalizedGraph:
    """Parse a dictionary configuration."""
    graph = NormalizedGraph(raw_input=data)
    known_keys: set[str] = set(START_KEYS)

    is_bare = _is_bare_adjacency(data)
    adjacency_key = next((k for k in ADJACENCY_KEYS if isinstance(data.get(k), dict)), None)
    edge_key = next(
        (k for k in EDGE_KEYS if _looks_like_edges(data.get(k)) and (data[k] or not is_bare)),
        None,
    )

    if adjacency_key is not None:
        graph.adjacency = _parse_adjacency(data[adjacency_key])
        known_keys.add(adjacency_key)
    elif edge_key is not None:
        graph.adjacency = _parse_edges(data[edge_key])
        known_keys.add(edge_key)
    elif is_bare:
        # Every key is a node, even one named like a wrapper or start key
        graph.adjacency = _parse_adjacency(data)
        return _with_default_start(graph)
    else:
        raise ValueError(
            f"No graph found in input; expected one of {ADJACENCY_KEYS + EDGE_KEYS}"
        )

    for key in START_KEYS:
        if data.get(key) is not None:
            graph.start = coerce_node(data[key])
            break

    # Store any additional metadata
    graph.metadata = {k: v for k, v in data.items() if k not in known_keys}

    return _with_default_start(graph)


def _is_bare_adjacency(data: dict) -> bool:
    """Check if every value is a child list (or null for a leaf)."""
    return all(v is None or isinstance(v, list) for v in data.values())


def _looks_like_edges(value: Any) -> bool:
    """Check if a value is a list of pairs or edge objects rather than child ids."""
    return isinstance(value, list) and all(isinstance(e, (list, tuple, dict)) for e in value)


def _parse_adjacency(data: dict) -> dict[Node, list[Node]]:
    """Parse a node -> children mapping."""
    adjacency: dict[Node, list[Node]] = {}
    for parent, children in data.items():
        if children is None:
            children = []
        if not isinstance(children, list):
            raise ValueError(
                f"Children of node {parent!r} must be a list, got {type(children).__name__}"
            )
        node = coerce_node(parent)
        adjacency.setdefault(node, []).extend(coerce_node(c) for c in children)
    return adjacency


def _parse_edges(edges: list) -> dict[Node, list[Node]]:
    """Parse a list of (parent, child) edges, keeping their order."""
    adjacency: dict[Node, list[Node]] = {}
    for edge in edges:
        if isinstance(edge, dict):
            parent = edge.get("source", edge.get("from"))
            child = edge.get("target", edge.get("to"))
        elif isinstance(edge, (list, tuple)) and len(edge) == 2:
            parent, child = edge
        else:
            raise ValueError(f"Invalid edge: {edge!r}")

        if parent is None or child is None:
            raise ValueError(f"Edge is missing an endpoint: {edge!r}")

        adjacency.setdefault(coerce_node(parent), []).append(coerce_node(child))
    return adjacency


def _parse_text(text: str) -> NormalizedGraph:
    """Parse a plain text edge listing."""
    graph = NormalizedGraph(raw_input=text)

    for line_no, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.split("#", 1)[0].strip()
        if not line:
            continue

        separator = next((s for s in _TEXT_SEPARATORS if s in line), None)
        if separator is None:
            raise ValueError(
                f"Line {line_no}: expected 'parent -> children' or 'parent: children', got {raw_line!r}"
            )

        head, _, tail = line.partition(separator)
        parent = coerce_node(head)
        children = [coerce_node(c) for c in re.split(r"[,\s]+", tail.strip()) if c]
        graph.adjacency.setdefault(parent, []).extend(children)

    return _with_default_start(graph)


def _with_default_start(graph: NormalizedGraph) -> NormalizedGraph:
    """Fall back to the first listed node when no start was given."""
    if graph.start is None and graph.adjacency:
        graph.start = next(iter(graph.adjacency))
    return graph
