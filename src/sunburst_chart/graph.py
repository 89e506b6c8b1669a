"""Build chart input trees from JSON files or networkx graphs."""

import json
from pathlib import Path
from typing import Any

import networkx as nx

GRAPH_READERS = {
    ".graphml": nx.read_graphml,
    ".gml": nx.read_gml,
}


def _find_root(G: nx.DiGraph) -> Any:
    roots = [node for node, degree in G.in_degree() if degree == 0]
    if len(roots) != 1:
        raise ValueError(f"Expected exactly one root node, found {len(roots)}")
    return roots[0]


def tree_from_graph(
    G: nx.Graph,
    root: Any = None,
    value_attr: str = "value",
    color_attr: str = "color",
) -> dict[str, Any]:
    """Convert a tree-shaped graph into a nested input tree.

    Directed graphs must be arborescences (edges point from parent to
    child); undirected trees are oriented away from root. Node ids become
    the "name" of each node. A node without a value attribute gets the sum
    of its children's values.

    Args:
        G: Tree-shaped graph.
        root: Root node. Required for undirected graphs, otherwise the node
            without incoming edges.
        value_attr: Node attribute holding the weight.
        color_attr: Node attribute holding an explicit color.

    Returns:
        Nested {"name", "value", "children"[, "color"]} mapping.

    Raises:
        ValueError: If G is not a tree or a leaf has no value.
    """
    if len(G) == 0:
        raise ValueError("Graph is empty")

    if G.is_directed():
        if not nx.is_arborescence(G):
            raise ValueError("Directed graph is not a tree (arborescence)")
        tree = G
        if root is None:
            root = _find_root(G)
        elif root not in G:
            raise ValueError(f"Node {root!r} not in graph")
        elif G.in_degree(root) != 0:
            raise ValueError(f"Node {root!r} has a parent and cannot be the root")
    else:
        if not nx.is_tree(G):
            raise ValueError("Graph is not a tree")
        if root is None:
            raise ValueError("A root node is required for undirected graphs")
        if root not in G:
            raise ValueError(f"Node {root!r} not in graph")
        tree = nx.bfs_tree(G, root)

    def build(node: Any) -> dict[str, Any]:
        attrs = G.nodes[node]
        children = [build(child) for child in tree.successors(node)]
        value = attrs.get(value_attr)
        if value is None:
            if not children:
                raise ValueError(f"Leaf node {node!r} has no {value_attr!r} attribute")
            value = sum(child["value"] for child in children)

        result: dict[str, Any] = {"name": str(node), "value": value, "children": children}
        if attrs.get(color_attr):
            result["color"] = attrs[color_attr]
        return result

    return build(root)


def load_tree(path: Path, root: str | None = None) -> dict[str, Any]:
    """Load a chart input tree from a file.

    JSON files hold the nested tree directly; GraphML and GML files are read
    with networkx and converted with tree_from_graph.

    Args:
        path: Input file.
        root: Root node id for graph files (optional for directed graphs).

    Returns:
        The input tree.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        with open(path) as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a JSON object at the top level")
        return data

    reader = GRAPH_READERS.get(suffix)
    if reader is None:
        raise ValueError(f"{path}: unsupported file type {suffix!r}")
    return tree_from_graph(reader(path), root=root)
