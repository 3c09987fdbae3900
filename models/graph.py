"""Pydantic models for traversal results."""

from typing import Union
from pydantic import BaseModel, Field

# Node identifiers accepted at the input boundary
Node = Union[int, str]


class TraversalResult(BaseModel):
    """Outcome of a depth-first traversal."""

    start: Node = Field(
        description="Node the traversal started from"
    )
    order: list[Node] = Field(
        description="Nodes in the order they were first discovered"
    )
    visited_count: int = Field(
        description="Number of nodes reached from the start node"
    )
    node_count: int = Field(
        description="Number of distinct nodes in the graph, counting referenced-only leaves and the start node"
    )
