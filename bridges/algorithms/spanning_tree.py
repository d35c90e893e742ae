"""Minimum spanning trees: Prim and Kruskal.

Both work on the undirected view of the graph and return the tree as an
edge-set :class:`Path`.
"""

from __future__ import annotations

import math
from typing import Dict, List, Optional

from bridges.algorithms.union_find import UnionFind
from bridges.logging import get_logger
from bridges.model.elements import Edge
from bridges.model.graph import Graph
from bridges.model.path import Path
from bridges.types.base import NodeID

LOGGER = get_logger(__name__)


def prim_mst(graph: Graph, root: NodeID, directed: bool = False) -> Path:
    """Grow a minimum spanning tree from ``root`` with Prim's algorithm.

    A node's tentative distance is the weight of the lightest edge joining it
    to the tree, not its distance from the root. Among equally distant
    candidates the one added to the graph first is taken. Nodes that cannot be
    reached from the root are left out of the result.

    Args:
        graph: Graph to span.
        root: Node the tree is rooted at.
        directed: Adjacency view; the analysis layer always passes False.

    Returns:
        Tree edges in pre-order from the root.

    Raises:
        ValueError: If the root does not exist.
    """
    graph.get_node(root)

    # Tentative distance of every node not yet in the tree
    pool: Dict[NodeID, float] = {node: math.inf for node in graph.node_ids}
    parent: Dict[NodeID, Optional[NodeID]] = {node: None for node in graph.node_ids}
    children: Dict[NodeID, List[NodeID]] = {node: [] for node in graph.node_ids}
    pool[root] = 0

    while pool:
        current = min(pool, key=pool.__getitem__)
        if pool[current] == math.inf:
            # Everything left is disconnected from the tree.
            break
        del pool[current]

        for neighbor in graph.adjacent_nodes(current, directed=directed):
            if neighbor not in pool:
                continue
            edge = _lightest_edge(graph, current, neighbor, directed)
            if edge.weight < pool[neighbor]:
                previous = parent[neighbor]
                if previous is not None:
                    children[previous].remove(neighbor)
                parent[neighbor] = current
                children[current].append(neighbor)
                pool[neighbor] = edge.weight

    tree = Path(graph)
    _build_tree(graph, root, children, tree, directed)
    LOGGER.debug("Prim tree from %s has %d edges", root, len(tree.edges))
    return tree


def _build_tree(
    graph: Graph,
    parent: NodeID,
    children: Dict[NodeID, List[NodeID]],
    tree: Path,
    directed: bool,
) -> None:
    for child in children[parent]:
        edge = _lightest_edge(graph, parent, child, directed)
        tree.append_edge(edge.id, extend_nodes=False)
        _build_tree(graph, child, children, tree, directed)


def _lightest_edge(graph: Graph, a: NodeID, b: NodeID, directed: bool) -> Edge:
    return min(graph.edges_between(a, b, directed=directed), key=lambda e: e.weight)


def kruskal_mst(graph: Graph) -> Path:
    """Build a minimum spanning forest with Kruskal's algorithm.

    Edges are taken in ascending weight; equal weights keep creation order.
    An edge joins the forest only if its endpoints lie in different trees.

    Args:
        graph: Graph to span; edge orientation is ignored.

    Returns:
        Forest edges in the order they were accepted.
    """
    forest = UnionFind(graph.node_ids)
    tree = Path(graph)

    for edge in sorted(graph.edges, key=lambda e: e.weight):
        if forest.union(edge.start, edge.end):
            tree.append_edge(edge.id, extend_nodes=False)

    LOGGER.debug(
        "Kruskal forest has %d edges over %d trees", len(tree.edges), len(forest)
    )
    return tree
