from .graph import Node, TraversalResult

__all__ = [
    "Node",
    "TraversalResult",
]
