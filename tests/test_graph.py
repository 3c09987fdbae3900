"""Tests for the adjacency graph wrapper."""

import pytest

from parsers.graph_parser import parse_input
from traversal.graph import AdjacencyGraph, build_graph


@pytest.fixture
def tree() -> AdjacencyGraph:
    """Branching tree used across tests."""
    return AdjacencyGraph({1: [2, 3], 2: [4, 5], 3: [6]})


class TestAdjacencyGraph:
    """Tests for AdjacencyGraph."""

    def test_len_counts_referenced_leaves(self, tree):
        """Test leaves only referenced as children are counted."""
        assert len(tree) == 6

    def test_contains(self, tree):
        """Test membership for declared, referenced and unknown nodes."""
        assert 1 in tree
        assert 6 in tree
        assert 7 not in tree

    def test_nodes_in_first_seen_order(self, tree):
        """Test node listing keeps first-seen order."""
        assert tree.nodes == [1, 2, 3, 4, 5, 6]

    def test_get_children(self, tree):
        """Test children are returned in declared order."""
        assert tree.get_children(2) == [4, 5]

    def test_get_children_of_leaf_and_unknown(self, tree):
        """Test leaves and unknown nodes have no children."""
        assert tree.get_children(6) == []
        assert tree.get_children(42) == []

    def test_get_children_returns_copy(self, tree):
        """Test callers cannot mutate the graph through returned lists."""
        tree.get_children(1).append(99)

        assert tree.get_children(1) == [2, 3]

    def test_traverse(self, tree):
        """Test traversal delegates to the depth-first engine."""
        assert tree.traverse(1) == [1, 2, 3, 6, 4, 5]

    def test_reachable_from(self, tree):
        """Test reachability from an inner node."""
        assert tree.reachable_from(3) == {3, 6}

    def test_count_with_known_node(self, tree):
        """Test counting with a node already in the graph."""
        assert tree.count_with(6) == 6

    def test_count_with_unknown_node(self, tree):
        """Test counting with a node outside the graph adds one."""
        assert tree.count_with(42) == 7

    def test_copies_input_mapping(self):
        """Test later changes to the source mapping are not seen."""
        source = {"a": ["b"]}
        graph = AdjacencyGraph(source)
        source["a"].append("c")

        assert graph.get_children("a") == ["b"]


class TestBuildGraph:
    """Tests for build_graph."""

    def test_build_from_parsed_input(self):
        """Test building a graph from parser output."""
        graph = build_graph(parse_input("1 -> 2, 3\n3 -> 4"))

        assert len(graph) == 4
        assert graph.traverse(1) == [1, 2, 3, 4]
