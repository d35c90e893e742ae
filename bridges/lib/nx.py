"""NetworkX graph conversion utilities.

Example:
    >>> from bridges import Graph
    >>> from bridges.lib.nx import to_networkx
    >>>
    >>> graph = Graph()
    >>> a, b = graph.add_node(), graph.add_node()
    >>> graph.add_edge(a, b, weight=4)
    >>> G = to_networkx(graph)
    >>> G.edges[a, b]["capacity"]
    4
"""

from __future__ import annotations

from typing import Optional, Union

import networkx as nx

from bridges.model.graph import Graph


def to_networkx(
    graph: Graph, directed: Optional[bool] = None
) -> Union[nx.DiGraph, nx.Graph]:
    """Convert a Graph to a NetworkX graph keyed by node handles.

    Node attributes: ``label``, ``color``, ``position``. Edge attributes:
    ``id``, ``weight``, ``capacity`` (equal to the weight) and ``flow`` (None
    when not computed).

    Args:
        graph: Graph to convert.
        directed: Build a DiGraph if True, an undirected Graph if False.
            Defaults to the graph's own flag.

    Returns:
        A NetworkX DiGraph or Graph. In the undirected form antiparallel edges
        collapse to one; the lighter edge is kept.
    """
    if directed is None:
        directed = graph.is_directed
    nx_graph = nx.DiGraph() if directed else nx.Graph()

    for node in graph.nodes:
        nx_graph.add_node(
            node.id, label=node.label, color=node.color, position=node.position
        )

    for edge in graph.edges:
        if nx_graph.has_edge(edge.start, edge.end):
            if nx_graph.edges[edge.start, edge.end]["weight"] <= edge.weight:
                continue
        nx_graph.add_edge(
            edge.start,
            edge.end,
            id=edge.id,
            weight=edge.weight,
            capacity=edge.weight,
            flow=edge.flow,
        )
    return nx_graph
