"""Tests for graph.py input adapter."""

import json

import networkx as nx
import pytest

from sunburst_chart.graph import load_tree, tree_from_graph


@pytest.fixture
def sizes_graph() -> nx.DiGraph:
    """Directory-size tree: top -> (src -> a.py, b.py), docs."""
    G = nx.DiGraph()
    G.add_node("top")
    G.add_node("src", color="#abcdef")
    G.add_node("a.py", value=3)
    G.add_node("b.py", value=1)
    G.add_node("docs", value=2)
    G.add_edges_from([("top", "src"), ("src", "a.py"), ("src", "b.py"), ("top", "docs")])
    return G


class TestTreeFromGraph:
    """Tests for tree_from_graph function."""

    def test_directed(self, sizes_graph):
        """Node ids become names and missing values are summed."""
        tree = tree_from_graph(sizes_graph)
        assert tree["name"] == "top"
        assert tree["value"] == 6
        src, docs = tree["children"]
        assert src == {
            "name": "src",
            "value": 4,
            "color": "#abcdef",
            "children": [
                {"name": "a.py", "value": 3, "children": []},
                {"name": "b.py", "value": 1, "children": []},
            ],
        }
        assert docs["value"] == 2

    def test_undirected_needs_root(self, sizes_graph):
        """Undirected trees are oriented away from the given root."""
        undirected = sizes_graph.to_undirected()
        with pytest.raises(ValueError):
            tree_from_graph(undirected)
        tree = tree_from_graph(undirected, root="top")
        assert tree["value"] == 6

    def test_not_a_tree(self, sizes_graph):
        """Graphs with shared children are rejected."""
        sizes_graph.add_edge("docs", "a.py")
        with pytest.raises(ValueError):
            tree_from_graph(sizes_graph)

    def test_root_with_parent(self, sizes_graph):
        """An explicit root must not have a parent."""
        with pytest.raises(ValueError):
            tree_from_graph(sizes_graph, root="src")

    def test_unknown_root(self, sizes_graph):
        """An explicit root must be a node of the graph."""
        with pytest.raises(ValueError, match="not in graph"):
            tree_from_graph(sizes_graph, root="zzz")
        with pytest.raises(ValueError, match="not in graph"):
            tree_from_graph(sizes_graph.to_undirected(), root="zzz")

    def test_leaf_without_value(self):
        """Leaves need a value."""
        G = nx.DiGraph([("top", "leaf")])
        with pytest.raises(ValueError):
            tree_from_graph(G)

    def test_empty(self):
        """Empty graphs are rejected."""
        with pytest.raises(ValueError):
            tree_from_graph(nx.DiGraph())


class TestLoadTree:
    """Tests for load_tree function."""

    def test_json(self, tmp_path, nested_tree):
        """JSON files hold the tree directly."""
        path = tmp_path / "tree.json"
        path.write_text(json.dumps(nested_tree))
        assert load_tree(path) == nested_tree

    def test_json_must_be_object(self, tmp_path):
        """A JSON list is not a tree."""
        path = tmp_path / "tree.json"
        path.write_text("[1, 2]")
        with pytest.raises(ValueError):
            load_tree(path)

    def test_graphml(self, tmp_path, sizes_graph):
        """GraphML files go through networkx."""
        path = tmp_path / "tree.graphml"
        nx.write_graphml(sizes_graph, path)
        tree = load_tree(path)
        assert tree["name"] == "top"
        assert tree["value"] == 6

    def test_unsupported(self, tmp_path):
        """Unknown suffixes are rejected."""
        path = tmp_path / "tree.csv"
        path.write_text("")
        with pytest.raises(ValueError):
            load_tree(path)
