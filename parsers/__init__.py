from .graph_parser import parse_input, coerce_node, NormalizedGraph

__all__ = [
    "parse_input",
    "coerce_node",
    "NormalizedGraph",
]
